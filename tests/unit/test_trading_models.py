"""tests for trading value types."""

import pytest

from candyworks.trading.models import (
    DEFAULT_VOCABULARY,
    Basket,
    BasketParseError,
    Kind,
    KindVocabulary,
    Trade,
    standard_trades,
)

# -- fixture helpers --


def make_basket(eggs=0, worms=0, cakes=0, fishes=0, meats=0) -> Basket:
    """helper to build baskets by kind name."""
    return Basket((eggs, worms, cakes, fishes, meats))


class TestBasketArithmetic:
    """tests for basket combination and comparison."""

    def test_none_is_all_zero(self):
        """none() should have every count at zero."""
        assert Basket.none().counts == (0, 0, 0, 0, 0)
        assert Basket.none().total() == 0

    def test_add_and_sub_are_fieldwise(self):
        """+ and - should combine matching kinds."""
        a = make_basket(eggs=3, worms=1)
        b = make_basket(eggs=1, meats=2)
        assert a + b == make_basket(eggs=4, worms=1, meats=2)
        assert a - b == make_basket(eggs=2, worms=1, meats=-2)

    def test_total_sums_all_kinds(self):
        """total should add every count."""
        expected_total = 15
        assert make_basket(1, 2, 3, 4, 5).total() == expected_total

    def test_contains_requires_every_kind(self):
        """contains should hold only when each count covers the other."""
        basket = make_basket(eggs=3, worms=1)
        assert basket.contains(make_basket(eggs=2, worms=1))
        assert basket.contains(Basket.none())
        assert not basket.contains(make_basket(worms=2))

    def test_equal_baskets_hash_equal(self):
        """baskets with the same counts should collapse in a set."""
        seen = {make_basket(eggs=1), make_basket(eggs=1), make_basket(worms=1)}
        expected_distinct = 2
        assert len(seen) == expected_distinct

    def test_list_counts_stored_as_tuple(self):
        """a list of counts should still give a hashable basket."""
        basket = Basket([3, 0, 0, 0, 0])
        assert basket.counts == (3, 0, 0, 0, 0)
        assert basket in {make_basket(eggs=3)}

    def test_wrong_arity_rejected(self):
        """a basket must have exactly five counts."""
        with pytest.raises(ValueError):
            Basket((1, 2))


class TestAddByIndex:
    """tests for positional adjustment."""

    def test_adjusts_one_kind(self):
        """should change only the indexed kind."""
        basket = Basket.none().add_by_index(3, 2)
        assert basket == make_basket(fishes=2)

    def test_returns_new_basket(self):
        """baskets are frozen, the original stays untouched."""
        original = make_basket(eggs=1)
        original.add_by_index(0, 5)
        assert original == make_basket(eggs=1)

    def test_out_of_range_is_noop(self):
        """indices outside 0..4 should leave the basket unchanged."""
        basket = make_basket(eggs=1)
        assert basket.add_by_index(5, 3) == basket
        assert basket.add_by_index(-1, 3) == basket


class TestTrade:
    """tests for applying trades to baskets."""

    def test_trade_applies_give_and_receive(self):
        """3 eggs for 1 worm should turn 3 eggs into 1 worm."""
        result = make_basket(eggs=3).trade(Trade.standard(0, 1))
        assert result == make_basket(worms=1)

    def test_trade_rejected_when_short(self):
        """a trade that would go negative should be rejected."""
        assert make_basket(eggs=2).trade(Trade.standard(0, 1)) is None

    def test_trade_rejected_on_any_negative_field(self):
        """a custom trade short on one kind should be rejected."""
        trade = Trade(give=make_basket(eggs=1, cakes=1), receive=make_basket(meats=1))
        assert make_basket(eggs=5).trade(trade) is None
        assert make_basket(eggs=1, cakes=1).trade(trade) == make_basket(meats=1)

    def test_standard_trade_shape(self):
        """standard trade gives 3 of one kind for 1 of another."""
        trade = Trade.standard(2, 4)
        assert trade.give == make_basket(cakes=3)
        assert trade.receive == make_basket(meats=1)

    def test_standard_trades_cover_distinct_pairs(self):
        """20 rules, one per ordered pair of distinct kinds."""
        trades = standard_trades()
        expected_count = 20
        assert len(trades) == expected_count
        assert len(set(trades)) == expected_count
        assert trades[0] == Trade.standard(0, 1)
        for trade in trades:
            give_kind = trade.give.counts.index(3)
            receive_kind = trade.receive.counts.index(1)
            assert give_kind != receive_kind


class TestDisplay:
    """tests for human-readable baskets and trades."""

    def test_skips_zero_counts(self):
        """default display should list only non-zero kinds."""
        assert make_basket(eggs=1, worms=2).display() == " 1 egg,  2 worms"

    def test_include_zeros(self):
        """include_zeros should list every kind, zeros in plural."""
        text = make_basket(eggs=1).display(include_zeros=True)
        assert text == " 1 egg,  0 worms,  0 cakes,  0 fishes,  0 meats"

    def test_empty_basket_is_empty_string(self):
        """an empty basket without zeros renders as nothing."""
        assert str(Basket.none()) == ""

    def test_trade_display(self):
        """trades render as give -> receive."""
        assert str(Trade.standard(0, 1)) == " 3 eggs ->  1 worm"

    def test_custom_vocabulary(self):
        """display should use whatever names the vocabulary carries."""
        vocabulary = KindVocabulary(
            kinds=(
                Kind("ore", "ores", "o"),
                Kind("gem", "gems", "g"),
                Kind("log", "logs", "l"),
                Kind("hide", "hides", "h"),
                Kind("herb", "herbs", "b"),
            )
        )
        assert make_basket(worms=1, meats=4).display(vocabulary) == " 1 gem,  4 herbs"


class TestKindVocabulary:
    """tests for parsing raw basket input."""

    def test_requires_five_kinds(self):
        """a vocabulary must name exactly five kinds."""
        with pytest.raises(ValueError):
            KindVocabulary(kinds=DEFAULT_VOCABULARY.kinds[:4])

    def test_parse_letters_counts_each_letter(self):
        """each recognised letter adds one unit, case-insensitive."""
        basket = DEFAULT_VOCABULARY.parse_letters("EEw")
        assert basket == make_basket(eggs=2, worms=1)

    def test_parse_letters_ignores_unknown(self):
        """characters naming no kind should be skipped."""
        assert DEFAULT_VOCABULARY.parse_letters("x z!") == Basket.none()

    def test_parse_counts(self):
        """comma-separated counts map to kinds in order."""
        basket = DEFAULT_VOCABULARY.parse_counts("3, 0,1,0 ,2")
        assert basket == make_basket(eggs=3, cakes=1, meats=2)

    @pytest.mark.parametrize("text", ["1,2", "a,0,0,0,0", "-1,0,0,0,0"])
    def test_parse_counts_rejects_malformed(self, text):
        """wrong arity, non-numbers and negatives should raise."""
        with pytest.raises(BasketParseError):
            DEFAULT_VOCABULARY.parse_counts(text)

    @pytest.mark.parametrize("text", ["3", "e3w"])
    def test_parse_rejects_digits_in_letters(self, text):
        """a bare number is not a letter basket."""
        with pytest.raises(BasketParseError):
            DEFAULT_VOCABULARY.parse(text)

    def test_parse_picks_form(self):
        """commas mean counts, anything else means letters."""
        assert DEFAULT_VOCABULARY.parse("0,0,2,0,0") == make_basket(cakes=2)
        assert DEFAULT_VOCABULARY.parse("cc") == make_basket(cakes=2)

"""value types shared by the trade explorer and its presentation layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

KIND_COUNT = 5

# units given / received by a standard trade
STANDARD_GIVE = 3
STANDARD_RECEIVE = 1


class BasketParseError(ValueError):
    """raised when raw basket input cannot be turned into a Basket."""


# -- kind vocabulary --


@dataclass(frozen=True)
class Kind:
    """display names and input letter for a single resource kind."""

    singular: str
    plural: str
    letter: str


@dataclass(frozen=True)
class KindVocabulary:
    """names for the five resource kinds, in basket field order."""

    kinds: tuple[Kind, ...]

    def __post_init__(self) -> None:
        if len(self.kinds) != KIND_COUNT:
            msg = f"expected {KIND_COUNT} kinds, got {len(self.kinds)}"
            raise ValueError(msg)

    def name(self, index: int, count: int) -> str:
        """Return the singular or plural name of a kind for the given count."""
        kind = self.kinds[index]
        return kind.singular if count == 1 else kind.plural

    def parse_letters(self, text: str) -> Basket:
        """Build a basket from a letter string, one unit per letter.

        letters are matched case-insensitively against each kind's letter.
        characters that name no kind are ignored.

        Args:
            text: raw input such as "EEW"

        Returns:
            basket with one unit per recognised letter
        """
        letters = {kind.letter.lower(): i for i, kind in enumerate(self.kinds)}
        basket = Basket.none()
        for char in text.lower():
            if char in letters:
                basket = basket.add_by_index(letters[char], 1)
        return basket

    def parse_counts(self, text: str) -> Basket:
        """Build a basket from comma-separated counts ("3,0,1,0,0").

        Args:
            text: raw input with one integer per kind

        Returns:
            parsed basket

        Raises:
            BasketParseError: on wrong arity, non-integers or negative counts
        """
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != KIND_COUNT:
            msg = f"expected {KIND_COUNT} counts, got {len(parts)}"
            raise BasketParseError(msg)
        try:
            counts = [int(part) for part in parts]
        except ValueError as e:
            raise BasketParseError(f"not a number in {text!r}") from e
        if any(count < 0 for count in counts):
            raise BasketParseError(f"negative count in {text!r}")
        return Basket.from_counts(counts)

    def parse(self, text: str) -> Basket:
        """Parse either form: counts when the text has commas, letters otherwise.

        Raises:
            BasketParseError: on malformed counts, or digits in letter form
        """
        if "," in text:
            return self.parse_counts(text)
        if any(char.isdigit() for char in text):
            msg = f"{text!r} mixes digits into letters, use five comma-separated counts"
            raise BasketParseError(msg)
        return self.parse_letters(text)


DEFAULT_VOCABULARY = KindVocabulary(
    kinds=(
        Kind("egg", "eggs", "e"),
        Kind("worm", "worms", "w"),
        Kind("cake", "cakes", "c"),
        Kind("fish", "fishes", "f"),
        Kind("meat", "meats", "m"),
    )
)


# -- basket --


@dataclass(frozen=True, order=True)
class Basket:
    """counts of each resource kind.

    frozen so it can key the explorer's seen-set. arithmetic may produce
    negative fields; only `trade` guards against that.
    """

    counts: tuple[int, ...] = (0,) * KIND_COUNT

    def __post_init__(self) -> None:
        # lists and generators are accepted, stored as a hashable tuple
        object.__setattr__(self, "counts", tuple(self.counts))
        if len(self.counts) != KIND_COUNT:
            msg = f"expected {KIND_COUNT} counts, got {len(self.counts)}"
            raise ValueError(msg)

    @classmethod
    def none(cls) -> Basket:
        """Return the all-zero basket."""
        return cls()

    @classmethod
    def from_counts(cls, counts: Iterable[int]) -> Basket:
        return cls(tuple(counts))

    def __iter__(self) -> Iterator[int]:
        return iter(self.counts)

    def __getitem__(self, index: int) -> int:
        return self.counts[index]

    def __add__(self, other: Basket) -> Basket:
        return Basket(tuple(a + b for a, b in zip(self.counts, other.counts, strict=True)))

    def __sub__(self, other: Basket) -> Basket:
        return Basket(tuple(a - b for a, b in zip(self.counts, other.counts, strict=True)))

    def add_by_index(self, index: int, delta: int) -> Basket:
        """Return this basket with one kind adjusted by `delta`.

        an index outside 0..4 leaves the basket unchanged.
        """
        if not 0 <= index < KIND_COUNT:
            return self
        counts = list(self.counts)
        counts[index] += delta
        return Basket(tuple(counts))

    def is_valid(self) -> bool:
        return all(count >= 0 for count in self.counts)

    def trade(self, rule: Trade) -> Basket | None:
        """Apply a trade, or return None if any count would go negative."""
        result = self - rule.give + rule.receive
        if not result.is_valid():
            return None
        return result

    def total(self) -> int:
        return sum(self.counts)

    def contains(self, other: Basket) -> bool:
        """True if every count covers the matching count of `other`."""
        return all(a >= b for a, b in zip(self.counts, other.counts, strict=True))

    def display(
        self,
        vocabulary: KindVocabulary = DEFAULT_VOCABULARY,
        *,
        include_zeros: bool = False,
    ) -> str:
        """Render as "3 eggs,  1 worm" (counts right-aligned to width 2).

        Args:
            vocabulary: kind names to use
            include_zeros: also list kinds with a zero count

        Returns:
            comma-joined description, empty for an empty basket without zeros
        """
        parts = [
            f"{count:2} {vocabulary.name(i, count)}"
            for i, count in enumerate(self.counts)
            if include_zeros or count != 0
        ]
        return ", ".join(parts)

    def __str__(self) -> str:
        return self.display()


# -- trades --


@dataclass(frozen=True)
class Trade:
    """give one basket, receive another."""

    give: Basket
    receive: Basket

    @classmethod
    def standard(cls, give_kind: int, receive_kind: int) -> Trade:
        """3 of `give_kind` for 1 of `receive_kind`."""
        give = Basket.none().add_by_index(give_kind, STANDARD_GIVE)
        receive = Basket.none().add_by_index(receive_kind, STANDARD_RECEIVE)
        return cls(give=give, receive=receive)

    def display(self, vocabulary: KindVocabulary = DEFAULT_VOCABULARY) -> str:
        return f"{self.give.display(vocabulary)} -> {self.receive.display(vocabulary)}"

    def __str__(self) -> str:
        return self.display()


def standard_trades(kind_count: int = KIND_COUNT) -> list[Trade]:
    """Return a standard trade for every ordered pair of distinct kinds."""
    return [
        Trade.standard(give, receive)
        for give in range(kind_count)
        for receive in range(kind_count)
        if give != receive
    ]


# -- explorer results --


@dataclass(frozen=True)
class TradeStep:
    """back-reference from an explored state to the state it came from."""

    index: int  # table index of the parent state
    trade: Trade


@dataclass(frozen=True)
class ExploredState:
    """a table entry: a reachable basket and how it was first reached."""

    basket: Basket
    parent: TradeStep | None = None  # None for the starting basket


@dataclass
class ExplorationStats:
    """summary of an explored state table."""

    combinations: int
    min_total: int
    max_total: int
    max_trades: int


@dataclass
class CandyRequest:
    """fully parsed input for one explore-and-route run."""

    start: Basket
    target: Basket
    custom_trades: list[Trade] = field(default_factory=list)

"""interactive console session: ask for baskets and trades, print a route."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from candyworks.trading.explorer import Explorer
from candyworks.trading.formatter import (
    NO_ROUTE,
    format_route_lines,
    format_statistics,
)
from candyworks.trading.models import DEFAULT_VOCABULARY, Basket, Trade

if TYPE_CHECKING:
    from collections.abc import Callable

    from candyworks.config import Settings
    from candyworks.trading.models import KindVocabulary

logger = logging.getLogger(__name__)

PROMPT = ">> "


class ConsoleSession:
    """drives one explore-and-route run over line-based input and output.

    `read_line` takes a prompt and returns the typed line, `write` prints a
    line. defaults are `input` and `print`, tests pass scripted callables.
    """

    def __init__(
        self,
        settings: Settings,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        vocabulary: KindVocabulary = DEFAULT_VOCABULARY,
    ) -> None:
        self.settings = settings
        self.read_line = read_line
        self.write = write
        self.vocabulary = vocabulary

    def _read_count(self, question: str) -> int:
        # re-ask until we get a non-negative integer
        while True:
            self.write(question)
            raw = self.read_line(PROMPT).strip()
            try:
                value = int(raw)
            except ValueError:
                self.write(f"{raw!r} is not a number")
                continue
            if value < 0:
                self.write("Quantities cannot be negative")
                continue
            return value

    def read_basket(self, verb: str) -> Basket:
        """Ask "How many <kind> do you <verb>?" for every kind."""
        basket = Basket.none()
        for i, kind in enumerate(self.vocabulary.kinds):
            count = self._read_count(f"How many {kind.plural} do you {verb}?")
            basket = basket.add_by_index(i, count)
        return basket

    def read_trades(self) -> list[Trade]:
        legend = ", ".join(
            f"{kind.letter.upper()} for {kind.plural}" for kind in self.vocabulary.kinds
        )
        self.write(f"Use {legend}")
        trades = []
        for _ in range(self.settings.custom_trades):
            give = self.vocabulary.parse_letters(self.read_line("Trade give: "))
            receive = self.vocabulary.parse_letters(self.read_line("Trade receive: "))
            trades.append(Trade(give=give, receive=receive))
        return trades

    def run(self) -> list[Trade] | None:
        """Run the full prompt flow.

        Returns:
            the route that was printed, or None when no route exists
        """
        start = self.read_basket("have")
        trades = self.read_trades()

        explorer = Explorer(start, self.settings.max_candies, trades)
        explorer.explore()
        self.write(format_statistics(explorer.statistics()))

        target = self.read_basket("want")
        route = explorer.find_optimal_route(target)
        if route is None:
            self.write(NO_ROUTE)
            return None

        for line in format_route_lines(explorer.replay(route), route, self.vocabulary):
            self.write(line)
        return route

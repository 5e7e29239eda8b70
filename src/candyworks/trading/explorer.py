"""state-space explorer for candy trading.

pure logic module, no I/O. walks every basket reachable from a starting
basket through a set of trades, then answers route queries over the
explored table.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import TYPE_CHECKING

from candyworks.trading.models import (
    Basket,
    ExplorationStats,
    ExploredState,
    Trade,
    TradeStep,
    standard_trades,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


class InvalidExplorerConfig(ValueError):
    """raised when an explorer is built from a negative basket or cap."""


class InvalidRouteError(ValueError):
    """raised when a route cannot be replayed from the starting basket."""

    def __init__(self, step: int, trade: Trade) -> None:
        """Initialize route error.

        Args:
            step: zero-based position of the rejected trade in the route
            trade: the trade that could not be applied
        """
        self.step = step
        self.trade = trade
        super().__init__(f"trade {step} ({trade}) cannot be applied")


class Explorer:
    """bounded breadth-first explorer over trade-reachable baskets.

    the explored table is a flat list; each entry points back to its parent
    by index, so routes are rebuilt by index-chasing toward entry 0.
    """

    def __init__(
        self,
        start: Basket,
        max_total: int,
        custom_trades: Iterable[Trade] = (),
    ) -> None:
        """Initialize the explorer.

        Args:
            start: starting basket, recorded as the root even if over the cap
            max_total: inclusive cap on the total of newly discovered baskets
            custom_trades: extra trades, tried before the standard ones

        Raises:
            InvalidExplorerConfig: on a negative starting count or cap
        """
        if not start.is_valid():
            msg = f"starting basket has a negative count: {start.counts}"
            raise InvalidExplorerConfig(msg)
        if max_total < 0:
            msg = f"max_total must be non-negative, got {max_total}"
            raise InvalidExplorerConfig(msg)

        self.start = start
        self.max_total = max_total
        # identical rules are not deduplicated
        self.trades: list[Trade] = [*custom_trades, *standard_trades()]
        self.combinations: list[ExploredState] = []

    def explore(self) -> int:
        """Fill the state table with every basket reachable within the cap.

        fifo order means each state's parent chain is a minimum-length
        route to it. any previous table is discarded.

        Returns:
            number of explored states (including the start)
        """
        started = time.perf_counter()

        table = [ExploredState(self.start)]
        seen = {self.start}
        frontier: deque[int] = deque([0])

        while frontier:
            index = frontier.popleft()
            basket = table[index].basket
            for trade in self.trades:
                result = basket.trade(trade)
                if result is None or result.total() > self.max_total:
                    continue
                if result in seen:
                    continue
                seen.add(result)
                table.append(ExploredState(result, TradeStep(index, trade)))
                frontier.append(len(table) - 1)

        self.combinations = table
        logger.info(
            "explored %d combinations in %.3fs (cap %d, %d trades)",
            len(table),
            time.perf_counter() - started,
            self.max_total,
            len(self.trades),
        )
        return len(table)

    def statistics(self) -> ExplorationStats | None:
        """Summarize the explored table, or None if nothing was explored."""
        if not self.combinations:
            return None

        totals = [state.basket.total() for state in self.combinations]
        max_trades = max(
            (
                self.chain_length(i)
                for i, state in enumerate(self.combinations)
                if state.parent is not None
            ),
            default=0,
        )
        return ExplorationStats(
            combinations=len(self.combinations),
            min_total=min(totals),
            max_total=max(totals),
            max_trades=max_trades,
        )

    def chain_length(self, index: int) -> int:
        """Count trades between table entry `index` and the root.

        stops at the root or at an index missing from the table.
        """
        length = 0
        current = index
        while 0 <= current < len(self.combinations):
            parent = self.combinations[current].parent
            if parent is None:
                break
            length += 1
            current = parent.index
        return length

    def _route_to(self, index: int) -> list[Trade]:
        route = []
        parent = self.combinations[index].parent
        while parent is not None:
            route.append(parent.trade)
            parent = self.combinations[parent.index].parent
        route.reverse()
        return route

    def find_optimal_route(self, target: Basket) -> list[Trade] | None:
        """Find trades leading from the start to a basket covering `target`.

        among explored baskets that cover the target, the one with the most
        total resources wins, first in table order on ties. that is not
        necessarily the one with the fewest trades.

        Args:
            target: basket the result must contain

        Returns:
            ordered trades (empty if the start already covers the target),
            or None if no explored basket covers it
        """
        if self.start.contains(target):
            return []

        candidates = [
            i
            for i, state in enumerate(self.combinations)
            if state.basket.contains(target)
        ]
        if not candidates:
            logger.debug("no explored basket contains %s", target)
            return None

        best = max(self.combinations[i].basket.total() for i in candidates)
        chosen = next(
            i for i in candidates if self.combinations[i].basket.total() == best
        )
        route = self._route_to(chosen)
        logger.debug(
            "route to %s: %d trades via entry %d", target, len(route), chosen
        )
        return route

    def replay(self, route: Sequence[Trade]) -> list[Basket]:
        """Apply a route to the starting basket step by step.

        Args:
            route: trades to apply in order

        Returns:
            baskets before the first trade and after each trade

        Raises:
            InvalidRouteError: if a trade is rejected along the way
        """
        baskets = [self.start]
        for step, trade in enumerate(route):
            result = baskets[-1].trade(trade)
            if result is None:
                raise InvalidRouteError(step, trade)
            baskets.append(result)
        return baskets

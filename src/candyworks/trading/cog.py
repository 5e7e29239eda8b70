"""discord cog exposing the trade explorer as a chat command."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from candyworks.config import load_settings
from candyworks.trading.explorer import Explorer
from candyworks.trading.formatter import (
    NO_ROUTE,
    format_route_table,
    format_statistics,
)
from candyworks.trading.models import (
    DEFAULT_VOCABULARY,
    BasketParseError,
    CandyRequest,
    Trade,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from candyworks.trading.models import KindVocabulary

logger = logging.getLogger(__name__)

# embed colors
COLOR_STATS = 0x3498DB  # blue
COLOR_ROUTE = 0x2ECC71  # green
COLOR_ERROR = 0xE74C3C  # red

USAGE = "Usage: `%candies <have> <want> [give:receive ...]` e.g. `%candies 6,0,0,0,0 w eee:c`"


def parse_trade(text: str, vocabulary: KindVocabulary = DEFAULT_VOCABULARY) -> Trade:
    """Parse "give:receive" letter strings into a trade.

    Raises:
        BasketParseError: if the separator is missing
    """
    give, sep, receive = text.partition(":")
    if not sep:
        msg = f"trade {text!r} needs a ':' between give and receive"
        raise BasketParseError(msg)
    return Trade(
        give=vocabulary.parse_letters(give),
        receive=vocabulary.parse_letters(receive),
    )


def parse_candy_request(
    args: Sequence[str],
    vocabulary: KindVocabulary = DEFAULT_VOCABULARY,
) -> CandyRequest:
    """Parse %candies arguments: start basket, target basket, custom trades.

    Raises:
        BasketParseError: on missing or malformed arguments
    """
    if len(args) < 2:  # noqa: PLR2004
        msg = "need at least a starting and a target basket"
        raise BasketParseError(msg)
    return CandyRequest(
        start=vocabulary.parse(args[0]),
        target=vocabulary.parse(args[1]),
        custom_trades=[parse_trade(arg, vocabulary) for arg in args[2:]],
    )


def solve_request(
    request: CandyRequest,
    max_total: int,
    vocabulary: KindVocabulary = DEFAULT_VOCABULARY,
) -> tuple[str, str]:
    """Explore a request and render its statistics and route.

    blocking; the cog runs it in a worker thread.

    Args:
        request: parsed start, target and custom trades
        max_total: inclusive cap on basket totals
        vocabulary: kind names

    Returns:
        tuple of (statistics text, route table or no-route message)
    """
    explorer = Explorer(request.start, max_total, request.custom_trades)
    explorer.explore()
    stats_desc = format_statistics(explorer.statistics())

    route = explorer.find_optimal_route(request.target)
    if route is None:
        return stats_desc, NO_ROUTE
    return stats_desc, format_route_table(explorer.replay(route), route, vocabulary)


class CandyWorks(commands.Cog):
    """candy trading route finder."""

    def __init__(self, client: commands.Bot) -> None:
        """Initialize the candy trading cog.

        Args:
            client: discord bot client
        """
        self.client = client
        self.settings = load_settings()
        self.vocabulary = DEFAULT_VOCABULARY

    @commands.command(name="candies")
    async def candies(self, ctx: commands.Context, *args: str) -> None:
        """Explore trades from one basket and show the route to another.

        Args:
            ctx: discord command context
            args: "<have> <want> [give:receive ...]"
        """
        logger.info("candies invoked by %s", ctx.author.name)

        try:
            request = parse_candy_request(args, self.vocabulary)
        except BasketParseError as e:
            embed = discord.Embed(
                title="Bad input",
                description=f"{e}\n{USAGE}",
                color=COLOR_ERROR,
            )
            await ctx.send(embed=embed)
            return

        try:
            # exploration is cpu-bound, keep it off the gateway loop
            stats_desc, route_desc = await asyncio.to_thread(
                solve_request, request, self.settings.max_candies, self.vocabulary
            )
            await ctx.send(
                embed=discord.Embed(
                    title="\U0001f36c Combinations",
                    description=stats_desc,
                    color=COLOR_STATS,
                )
            )
            await ctx.send(
                embed=discord.Embed(
                    title=f"\U0001f9ed Route → {request.target.display(self.vocabulary)}",
                    description=route_desc,
                    color=COLOR_ROUTE,
                )
            )
        except Exception:
            logger.exception("unexpected error in candies")
            await ctx.send("Something went wrong while exploring trades.")

from candyworks.trading.cog import CandyWorks

from .ready import ReadyConnection

cogs = [ReadyConnection, CandyWorks]


__all__ = ["cogs"]

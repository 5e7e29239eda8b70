import logging
import logging.handlers
import sys

import discord
from discord.ext import commands
from dotenv import load_dotenv

from .commands import cogs
from .config import Settings, load_settings
from .trading.console import ConsoleSession

logger = logging.getLogger("candyworks")


# setup logging
def init_logging(settings: Settings, *, bot: bool = False):
    handler = logging.handlers.RotatingFileHandler(
        filename=settings.log_file,
        encoding="utf-8",
        maxBytes=32 * 1024 * 1024,  # 32 MiB
        backupCount=5,  # Rotate through 5 files
    )
    dt_fmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(
        "[{asctime}] [{levelname:<8}] {name}: {message}", dt_fmt, style="{"
    )
    handler.setFormatter(formatter)

    loggers = [logger]
    if bot:
        loggers.append(logging.getLogger("discord"))
    for log in loggers:
        log.setLevel(logging.DEBUG)
        log.addHandler(handler)


# initialize env, wrapping in a function incase future configs are needed
def init_env() -> Settings:
    load_dotenv()
    return load_settings()


async def init_cogs(client: commands.Bot):
    for cog in cogs:
        logger.info("Initializing: %s", cog.__name__)
        await client.add_cog(cog(client))


class CandyBot(commands.Bot):
    async def setup_hook(self):
        await init_cogs(self)


def init_client():
    logger.info("Initializing discord bot")
    intents = discord.Intents.default()
    intents.message_content = True
    return CandyBot(intents=intents, command_prefix="%")


def run_bot(settings: Settings):
    if not settings.discord_token:
        sys.exit("DISCORD_TOKEN is not set")
    client = init_client()
    # handlers come from init_logging
    client.run(settings.discord_token, log_handler=None)


def run_console(settings: Settings):
    ConsoleSession(settings).run()


# entrypoint
def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    bot = argv[:1] == ["bot"]
    settings = init_env()
    init_logging(settings, bot=bot)
    if bot:
        run_bot(settings)
    else:
        run_console(settings)


if __name__ == "__main__":
    main()

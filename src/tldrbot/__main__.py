import asyncio
import logging
import os
import time

import discord
from discord.ext import commands
from dotenv import load_dotenv

load_dotenv()

token = os.getenv("DISCORD_TOKEN")
logger = logging.getLogger("tldrbot")
logging.basicConfig(level=logging.INFO)

intents = discord.Intents.default()
intents.message_content = True

EXTENSIONS = (
    "tldrbot.cogs.general",
    "tldrbot.cogs.summarize",
)


class TLDRBot(commands.Bot):
    async def setup_hook(self) -> None:
        for name in EXTENSIONS:
            # Avoid double-loading across crash/retry loops
            if name in self.extensions:
                continue
            await self.load_extension(name)
        try:
            synced = await self.tree.sync()
            logger.info("Synced %d application command(s)", len(synced))
        except discord.HTTPException:
            logger.exception("Registering slash commands failed")


bot = TLDRBot(
    command_prefix=commands.when_mentioned_or("!"),
    intents=intents,
    case_insensitive=True,
    help_command=None,
)


@bot.event
async def on_ready():
    logger.info("Bot is ready. Logged in as %s (ID: %s)", bot.user, bot.user.id)
    logger.info("Loaded cogs: %s", list(bot.cogs.keys()))


@bot.event
async def on_command_error(ctx: commands.Context, error: commands.CommandError):
    # Mentions like "@Bot summarize ..." are handled by a listener, not a command
    if isinstance(error, commands.CommandNotFound):
        return
    logger.error("Command %s failed: %s", ctx.command, error, exc_info=error)


async def main():
    if not token:
        raise SystemExit("DISCORD_TOKEN is not set")
    async with bot:
        logger.info("starting bot")
        await bot.start(token)


if __name__ == "__main__":
    # Robust launcher: retry on transient connect errors (e.g., gateway timeouts)
    while True:
        try:
            asyncio.run(main())
            break  # Normal exit
        except discord.LoginFailure:
            logger.exception("Invalid DISCORD_TOKEN; not retrying")
            raise
        except Exception as e:  # noqa: BLE001
            logger.exception("Bot crashed during startup/connect; retrying in 5s: %s", e)
            time.sleep(5)

from discord.ext import commands

from tldrbot.settings import DISCORD_MESSAGE_LIMIT

MAX_HELP_LEN = DISCORD_MESSAGE_LIMIT - 100  # keep a little margin below the limit


class General(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.command()
    async def ping(self, ctx: commands.Context):
        """Responds with Pong!"""
        await ctx.send("Pong!")

    @commands.command(name="help")
    async def help_cmd(self, ctx: commands.Context):
        """Show how to ask for a summary."""
        text = (
            "**TLDR Bot Help**\n"
            "Summaries\n"
            "- `/summarize [timeframe]` summarize recent messages in this channel.\n"
            "- `@Bot summarize <timeframe>` does the same from a mention.\n"
            "- Timeframes: `last hour` (default), `this morning`, `last day`.\n\n"
            "Other\n"
            "- `ping` returns `Pong!`.\n"
        )
        await ctx.send(text[:MAX_HELP_LEN])


async def setup(bot: commands.Bot):
    await bot.add_cog(General(bot))

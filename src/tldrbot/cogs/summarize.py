"""Summarize recent channel messages on request."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from tldrbot import settings
from tldrbot.delivery import ChannelReplySink, InteractionReplySink, ReplySink
from tldrbot.message_source import fetch_recent_lines
from tldrbot.summarization import (
    NO_CONTENT,
    SummarizationFailed,
    SummarizationPipeline,
    extract_mention_timeframe,
    parse_timeframe,
)
from tldrbot.text_generators import get_text_generator

_LOG = logging.getLogger(__name__)


def _is_text_channel(channel: object) -> bool:
    return channel is not None and isinstance(channel, discord.abc.Messageable)


class Summarize(commands.Cog):
    """Slash command and mention trigger for channel TLDRs."""

    def __init__(self, bot: commands.Bot, pipeline: SummarizationPipeline):
        self.bot = bot
        self.pipeline = pipeline
        self.fetch_limit = settings.FETCH_LIMIT
        self.timeout = settings.SUMMARY_TIMEOUT

    async def _run_pipeline(self, lines: list[str]):
        if self.timeout > 0:
            return await asyncio.wait_for(self.pipeline.summarize(lines), timeout=self.timeout)
        return await self.pipeline.summarize(lines)

    async def handle_summarize(
        self,
        sink: ReplySink,
        channel: Optional[discord.abc.Messageable],
        timeframe: Optional[str],
    ) -> None:
        """Fetch, summarize and reply for one request."""
        await sink.prepare()

        if not _is_text_channel(channel):
            await sink.deliver(settings.NOT_TEXT_CHANNEL_MESSAGE)
            return

        since = parse_timeframe(timeframe)
        try:
            lines = await fetch_recent_lines(channel, since, limit=self.fetch_limit)
            result = await self._run_pipeline(lines)
        except SummarizationFailed as exc:
            _LOG.warning("Summarize failed in channel %s: %r", getattr(channel, "id", "?"), exc.__cause__)
            await sink.deliver(exc.user_message)
            return
        except asyncio.TimeoutError:
            _LOG.error("Summarize timed out after %ss in channel %s", self.timeout, getattr(channel, "id", "?"))
            await sink.deliver(settings.FAILURE_MESSAGE)
            return
        except discord.DiscordException:
            _LOG.exception("Reading history failed in channel %s", getattr(channel, "id", "?"))
            await sink.deliver(settings.FAILURE_MESSAGE)
            return

        if result is NO_CONTENT:
            await sink.deliver(settings.NO_CONTENT_MESSAGE)
            return

        if not result.strip():
            _LOG.warning("Completion service returned an empty summary in channel %s", getattr(channel, "id", "?"))
            await sink.deliver(settings.FAILURE_MESSAGE)
            return

        await sink.deliver(result)

    @app_commands.command(name="summarize", description="Summarize recent channel messages.")
    @app_commands.describe(timeframe='e.g. "last hour", "this morning", "last day"')
    async def summarize_slash(
        self,
        interaction: discord.Interaction,
        timeframe: Optional[str] = None,
    ) -> None:
        sink = InteractionReplySink(interaction, fallback=settings.INTERACTION_FALLBACK)
        await self.handle_summarize(sink, interaction.channel, timeframe)

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        """Handle "@bot summarize <timeframe>" mentions."""
        if message.author.bot:
            return
        if self.bot.user is None or self.bot.user not in message.mentions:
            return
        if "summarize" not in message.content.lower():
            return

        timeframe = extract_mention_timeframe(message.content)
        sink = ChannelReplySink(message.channel, fallback=settings.CHANNEL_FALLBACK)
        await self.handle_summarize(sink, message.channel, timeframe)


async def setup(bot: commands.Bot):
    llm = get_text_generator(settings.SUMMARY_API, settings.SUMMARY_MODEL)
    pipeline = SummarizationPipeline(
        llm,
        max_chunk_chars=settings.MAX_CHUNK_CHARS,
        concurrency=settings.CONCURRENCY,
    )
    await bot.add_cog(Summarize(bot, pipeline))

"""Reading recent channel history as formatted chat lines."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import discord

from tldrbot.utils.discord_utils import get_display_name

_LOG = logging.getLogger(__name__)


def format_line(message: discord.Message) -> str:
    """Format a message as ``"<author>: <text>"``."""
    return f"{get_display_name(message.author)}: {message.content}"


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


async def fetch_recent_lines(
    channel: discord.abc.Messageable,
    since: datetime,
    *,
    limit: int = 100,
) -> list[str]:
    """
    Fetch messages posted at or after ``since`` as formatted lines.

    Only the ``limit`` most recent messages are considered. Messages without
    text content (attachment-only, embeds) are skipped.

    Args:
        channel: Text-capable channel to read
        since: Earliest creation time to include
        limit: Maximum number of history messages to read

    Returns:
        Lines sorted oldest-first
    """
    since = _aware(since)
    messages: list[discord.Message] = []
    async for msg in channel.history(limit=limit):
        if _aware(msg.created_at) < since:
            continue
        if not (msg.content or "").strip():
            continue
        messages.append(msg)

    messages.sort(key=lambda m: _aware(m.created_at))
    _LOG.debug("Fetched %d message(s) since %s", len(messages), since.isoformat())
    return [format_line(msg) for msg in messages]

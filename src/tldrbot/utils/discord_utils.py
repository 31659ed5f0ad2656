"""Discord utility functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tldrbot.settings import DISCORD_MESSAGE_LIMIT

if TYPE_CHECKING:
    import discord


def get_display_name(user: discord.User | discord.Member) -> str:
    """Get user's display name with proper fallback hierarchy.

    Priority: server nickname > global display name > username
    """
    if getattr(user, "nick", None):
        return user.nick

    if getattr(user, "global_name", None):
        return user.global_name

    return user.name


def split_for_discord(text: str, limit: int = DISCORD_MESSAGE_LIMIT) -> list[str]:
    """Split text into pieces that fit in one Discord message.

    Breaks on line boundaries where possible; a single line longer than
    ``limit`` is hard-cut. Blank lines inside a piece are kept, but trailing
    whitespace at a split point is dropped.
    """
    text = text.strip()
    if len(text) <= limit:
        return [text] if text else []
    chunks: list[str] = []
    buffer = ""
    for line in text.splitlines(keepends=True):
        if len(buffer) + len(line) > limit:
            if buffer:
                chunks.append(buffer.rstrip())
                buffer = ""
            while len(line) > limit:
                chunks.append(line[:limit])
                line = line[limit:]
        buffer += line
    if buffer.strip():
        chunks.append(buffer.rstrip())
    return [chunk for chunk in chunks if chunk]

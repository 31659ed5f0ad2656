"""Reply sinks that deliver summarize results back to Discord."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import discord

from tldrbot.utils.discord_utils import split_for_discord

_LOG = logging.getLogger(__name__)


class ReplySink(ABC):
    """Where the result of a summarize request is sent."""

    async def prepare(self) -> None:
        """Called once before the (possibly slow) work starts."""

    @abstractmethod
    async def deliver(self, text: str) -> None:
        """Send ``text`` to the requester."""
        raise NotImplementedError


class InteractionReplySink(ReplySink):
    """Replies to a slash command by editing its deferred response.

    When editing fails and ``fallback`` is enabled, the text is sent as a
    followup message instead.
    """

    def __init__(self, interaction: discord.Interaction, *, fallback: bool = True):
        self.interaction = interaction
        self.fallback = fallback

    async def prepare(self) -> None:
        if not self.interaction.response.is_done():
            await self.interaction.response.defer(thinking=True)

    async def deliver(self, text: str) -> None:
        pieces = split_for_discord(text)
        if not pieces:
            return
        first, rest = pieces[0], pieces[1:]
        try:
            await self.interaction.edit_original_response(content=first)
        except discord.HTTPException as exc:
            if not self.fallback:
                raise
            _LOG.warning("Editing deferred reply failed, sending followup instead: %s", exc)
            await self.interaction.followup.send(first)
        for piece in rest:
            await self.interaction.followup.send(piece)


class ChannelReplySink(ReplySink):
    """Replies to a mention by posting in the channel.

    With ``fallback`` enabled, a failed send is attempted once more.
    """

    def __init__(self, channel: discord.abc.Messageable, *, fallback: bool = False):
        self.channel = channel
        self.fallback = fallback

    async def _send(self, piece: str) -> None:
        try:
            await self.channel.send(piece)
        except discord.HTTPException as exc:
            if not self.fallback:
                raise
            _LOG.warning("Channel send failed, retrying once: %s", exc)
            await self.channel.send(piece)

    async def deliver(self, text: str) -> None:
        for piece in split_for_discord(text):
            await self._send(piece)

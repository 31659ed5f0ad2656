"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest


class DummyLLM:
    """Dummy LLM that records prompts and returns predictable summaries."""

    def __init__(self, fail_on: int | None = None):
        self.call_count = 0
        self.prompts = []
        self.fail_on = fail_on

    async def generate(self, prompt) -> str:
        self.call_count += 1
        self.prompts.append(prompt)
        if self.fail_on is not None and self.call_count == self.fail_on:
            raise RuntimeError("completion service unavailable")
        return f"  Summary #{self.call_count}  \n"


def user_prompt(prompt) -> str:
    """Return the user-turn text of a recorded prompt."""
    return prompt[-1]["content"]


@pytest.fixture
def dummy_llm():
    """Create a dummy LLM for testing."""
    return DummyLLM()


def make_message(author: str, content: str, created_at: datetime, *, bot: bool = False):
    """Create a mock Discord message."""
    message = MagicMock()
    message.content = content
    message.created_at = created_at
    message.author = MagicMock()
    message.author.nick = None
    message.author.global_name = None
    message.author.name = author
    message.author.bot = bot
    return message


class FakeHistory:
    """Async iterator standing in for ``channel.history()``."""

    def __init__(self, messages):
        self._messages = list(messages)

    def __aiter__(self):
        return self._iter()

    async def _iter(self):
        for msg in self._messages:
            yield msg


@pytest.fixture
def now():
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_discord_channel():
    """Create a mock Discord text channel with an empty history."""
    channel = MagicMock(spec=discord.TextChannel)
    channel.id = 123456789
    channel.name = "test-channel"
    channel.send = AsyncMock()
    channel.history = MagicMock(return_value=FakeHistory([]))
    return channel


@pytest.fixture
def mock_interaction(mock_discord_channel):
    """Create a mock slash-command interaction."""
    interaction = MagicMock()
    interaction.channel = mock_discord_channel
    interaction.response = MagicMock()
    interaction.response.is_done = MagicMock(return_value=False)
    interaction.response.defer = AsyncMock()
    interaction.edit_original_response = AsyncMock()
    interaction.followup = MagicMock()
    interaction.followup.send = AsyncMock()
    return interaction


@pytest.fixture
def mock_bot():
    """Create a mock Discord bot."""
    bot = MagicMock()
    bot.user = MagicMock()
    bot.user.id = 999888777
    bot.user.name = "TestBot"
    return bot

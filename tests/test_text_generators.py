"""Tests for completion-service backends."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tldrbot.text_generators import (
    AnthropicTextGenerator,
    OpenAIChatTextGenerator,
    get_text_generator,
)
from tldrbot.text_generators.base import normalize_messages

MESSAGES = [
    {"role": "system", "content": "You are helpful."},
    {"role": "user", "content": "Summarize this"},
]


class TestNormalizeMessages:
    def test_string_becomes_user_message(self):
        assert normalize_messages("hi") == [{"role": "user", "content": "hi"}]

    def test_message_list_passes_through(self):
        assert normalize_messages(MESSAGES) == MESSAGES

    def test_rejects_malformed_messages(self):
        with pytest.raises(TypeError):
            normalize_messages([{"content": "no role"}])

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            normalize_messages(42)  # type: ignore[arg-type]


class TestFactory:
    def test_openai(self):
        gen = get_text_generator("openai", "gpt-4o")
        assert isinstance(gen, OpenAIChatTextGenerator)
        assert gen.model == "gpt-4o"

    def test_anthropic(self):
        assert isinstance(get_text_generator("anthropic", "claude-sonnet-4-5"), AnthropicTextGenerator)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_text_generator("nope", "x")


class TestOpenAIChatTextGenerator:
    @pytest.mark.asyncio
    async def test_sends_role_messages_and_strips_reply(self):
        generator = OpenAIChatTextGenerator()
        choice = MagicMock()
        choice.message.content = "  - Alice said hi  \n"
        response = MagicMock()
        response.choices = [choice]
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=response)

        with patch.object(generator, "_get_client", return_value=client):
            result = await generator.generate(MESSAGES)

        assert result == "- Alice said hi"
        call_kwargs = client.chat.completions.create.call_args.kwargs
        assert call_kwargs["model"] == "gpt-4o"
        assert call_kwargs["messages"] == MESSAGES

    @pytest.mark.asyncio
    async def test_empty_content_becomes_empty_string(self):
        generator = OpenAIChatTextGenerator()
        choice = MagicMock()
        choice.message.content = None
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=MagicMock(choices=[choice]))

        with patch.object(generator, "_get_client", return_value=client):
            assert await generator.generate("hi") == ""

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        generator = OpenAIChatTextGenerator()
        client = MagicMock()
        client.chat.completions.create = AsyncMock(side_effect=RuntimeError("down"))

        with patch.object(generator, "_get_client", return_value=client):
            with pytest.raises(RuntimeError):
                await generator.generate("hi")


class TestAnthropicTextGenerator:
    @pytest.mark.asyncio
    async def test_system_message_lifted_to_parameter(self):
        generator = AnthropicTextGenerator(model="claude-sonnet-4-5")
        block = MagicMock()
        block.text = "Digest"
        client = MagicMock()
        client.messages.create = AsyncMock(return_value=MagicMock(content=[block]))

        with patch.object(generator, "_get_client", return_value=client):
            result = await generator.generate(MESSAGES)

        assert result == "Digest"
        call_kwargs = client.messages.create.call_args.kwargs
        assert call_kwargs["system"] == "You are helpful."
        assert call_kwargs["messages"] == [{"role": "user", "content": "Summarize this"}]
        assert call_kwargs["model"] == "claude-sonnet-4-5"

    @pytest.mark.asyncio
    async def test_without_system_message(self):
        generator = AnthropicTextGenerator()
        block = MagicMock()
        block.text = "ok"
        client = MagicMock()
        client.messages.create = AsyncMock(return_value=MagicMock(content=[block]))

        with patch.object(generator, "_get_client", return_value=client):
            await generator.generate("hello")

        assert "system" not in client.messages.create.call_args.kwargs

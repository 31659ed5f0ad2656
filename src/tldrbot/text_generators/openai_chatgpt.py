# text_generators/openai_chatgpt.py
from __future__ import annotations

from typing import Dict
import logging

from openai import AsyncOpenAI

from .base import Prompt, TextGeneratorAPI, normalize_messages

_CLIENT_CACHE: Dict[str, AsyncOpenAI] = {}
_LOG = logging.getLogger(__name__)


class OpenAIChatTextGenerator(TextGeneratorAPI):
    """Text-generation backend for OpenAI chat models (default: gpt-4o).

    Requires OPENAI_API_KEY in the environment.
    Accepts either a single string or a list of {role, content} messages;
    system messages are passed through to Chat Completions as-is.
    """

    def __init__(self, model: str = "gpt-4o") -> None:
        self.model = model

    def _get_client(self) -> AsyncOpenAI:
        if "default" not in _CLIENT_CACHE:
            _CLIENT_CACHE["default"] = AsyncOpenAI()  # picks up OPENAI_API_KEY
        return _CLIENT_CACHE["default"]

    async def generate(
        self,
        prompt: Prompt,
        *,
        temperature: float = 1.0,
    ) -> str:
        messages = normalize_messages(prompt)
        client = self._get_client()

        _LOG.debug("OpenAI chat completion: model=%s messages=%d", self.model, len(messages))
        resp = await client.chat.completions.create(
            model=self.model,
            messages=messages,      # type: ignore[arg-type]
            temperature=temperature,
        )
        choice = resp.choices[0]
        return (choice.message.content or "").strip()

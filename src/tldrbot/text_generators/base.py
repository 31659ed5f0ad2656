from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Union


Prompt = Union[str, Sequence[Dict[str, Any]]]


class TextGeneratorAPI(ABC):
    """Abstract base class for completion-service providers."""

    @abstractmethod
    async def generate(self, prompt: Prompt) -> str:
        """Return generated text for the given prompt."""
        raise NotImplementedError


def normalize_messages(prompt: Prompt) -> List[Dict[str, Any]]:
    """Turn a prompt into a list of {role, content} messages.

    A plain string becomes a single user message.
    """
    if isinstance(prompt, str):
        return [{"role": "user", "content": prompt}]
    if isinstance(prompt, Sequence):
        if not all(isinstance(m, dict) and "role" in m and "content" in m for m in prompt):
            raise TypeError("Each message must be a dict with 'role' and 'content' keys")
        return list(prompt)
    raise TypeError("prompt must be a string or a sequence of message dicts")

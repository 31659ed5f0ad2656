"""Summary generation logic."""

from collections.abc import Sequence
from typing import Any, Protocol

from tldrbot import settings


class CompletionService(Protocol):
    """Protocol for the LLM interface."""

    async def generate(self, prompt: str | Sequence[dict[str, Any]]) -> str:
        """Generate text from a prompt or a list of role messages."""
        ...


def build_chunk_prompt(chunk: Sequence[str]) -> str:
    """
    Build the prompt for summarizing one chunk of raw chat lines.

    Args:
        chunk: Formatted lines ("author: text"), oldest first

    Returns:
        Formatted prompt for LLM
    """
    messages_text = "\n".join(chunk)
    return f"{settings.CHUNK_INSTRUCTION}:\n\n{messages_text}"


def build_aggregate_prompt(summaries: Sequence[str]) -> str:
    """
    Build the prompt that merges per-chunk summaries into one.

    Each summary is labeled with its 1-based chunk index and the blocks are
    separated by a blank line, in chunk order.

    Args:
        summaries: Chunk summaries in original chunk order

    Returns:
        Formatted prompt for LLM
    """
    combined_text = "\n\n".join(
        f"Chunk {i} summary:\n{summary}" for i, summary in enumerate(summaries, start=1)
    )
    return f"{settings.AGGREGATE_INSTRUCTION}\n\n{combined_text}"


def _as_messages(prompt: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": settings.SUMMARIZER_SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


class ChunkSummarizer:
    """Summarizes a single chunk with one completion request."""

    def __init__(self, llm: CompletionService):
        self.llm = llm

    async def summarize_chunk(self, chunk: Sequence[str]) -> str:
        """
        Generate a digest of one chunk.

        Errors from the completion service propagate unchanged.

        Args:
            chunk: Lines to summarize

        Returns:
            Summary text
        """
        prompt = build_chunk_prompt(chunk)
        summary_text = await self.llm.generate(_as_messages(prompt))

        return summary_text.strip()


class AggregateSummarizer:
    """Merges several chunk summaries into a single cohesive summary."""

    def __init__(self, llm: CompletionService):
        self.llm = llm

    async def summarize_aggregate(self, summaries: Sequence[str]) -> str:
        """
        Combine chunk summaries, keeping any per-author grouping.

        Args:
            summaries: Chunk summaries in original chunk order (at least two)

        Returns:
            Combined summary text
        """
        if len(summaries) < 2:
            raise ValueError("aggregation needs at least two chunk summaries")

        prompt = build_aggregate_prompt(summaries)
        combined_text = await self.llm.generate(_as_messages(prompt))

        return combined_text.strip()

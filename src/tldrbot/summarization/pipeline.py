"""Chunk-and-summarize pipeline that turns chat lines into one TLDR."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from tldrbot import settings
from .chunking import MAX_CHUNK_SIZE, chunk_lines
from .summarizer import AggregateSummarizer, ChunkSummarizer, CompletionService

_LOG = logging.getLogger(__name__)


class NoContent:
    """Result returned when there is nothing to summarize."""

    _instance: NoContent | None = None

    def __new__(cls) -> NoContent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_CONTENT"

    def __bool__(self) -> bool:
        return False


NO_CONTENT = NoContent()


class SummarizationFailed(Exception):
    """Summarization could not produce a complete result.

    The message is safe to show to end users; the underlying error is kept
    on ``__cause__`` and in the log.
    """

    user_message = settings.FAILURE_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class SummarizationPipeline:
    """Chunks lines, summarizes each chunk and merges the results.

    The pipeline keeps no per-invocation state, so one instance can serve
    concurrent commands.
    """

    def __init__(
        self,
        llm: CompletionService,
        *,
        max_chunk_chars: int = MAX_CHUNK_SIZE,
        concurrency: int = 1,
    ):
        """
        Initialize pipeline.

        Args:
            llm: Completion service used for every request
            max_chunk_chars: Chunk budget in size units
            concurrency: Maximum chunk summaries in flight (1 = sequential)
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self.chunk_summarizer = ChunkSummarizer(llm)
        self.aggregate_summarizer = AggregateSummarizer(llm)
        self.max_chunk_chars = max_chunk_chars
        self.concurrency = concurrency

    async def _summarize_chunks(self, chunks: list[list[str]]) -> list[str]:
        if self.concurrency == 1:
            summaries = []
            for index, chunk in enumerate(chunks, start=1):
                _LOG.debug("Summarizing chunk %d/%d (%d lines)", index, len(chunks), len(chunk))
                summaries.append(await self.chunk_summarizer.summarize_chunk(chunk))
            return summaries

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _bounded(chunk: list[str]) -> str:
            async with semaphore:
                return await self.chunk_summarizer.summarize_chunk(chunk)

        tasks = [asyncio.ensure_future(_bounded(chunk)) for chunk in chunks]
        try:
            # gather returns results in argument order regardless of completion order
            return list(await asyncio.gather(*tasks))
        except BaseException:
            # No chunk may start or keep running once the pipeline has failed
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def summarize(self, lines: Sequence[str]) -> str | NoContent:
        """
        Summarize chat lines into a single text.

        Args:
            lines: Formatted chat lines, oldest first

        Returns:
            The final summary, or NO_CONTENT when ``lines`` is empty

        Raises:
            SummarizationFailed: if any completion request fails
        """
        if not lines:
            return NO_CONTENT

        try:
            chunks = chunk_lines(lines, self.max_chunk_chars)
            _LOG.info("Summarizing %d lines in %d chunk(s)", len(lines), len(chunks))

            summaries = await self._summarize_chunks(chunks)

            if len(summaries) == 1:
                return summaries[0]

            return await self.aggregate_summarizer.summarize_aggregate(summaries)
        except Exception as exc:
            _LOG.exception("Summarization failed")
            raise SummarizationFailed() from exc


async def summarize(
    lines: Sequence[str],
    llm: CompletionService,
    *,
    max_chunk_chars: int = MAX_CHUNK_SIZE,
    concurrency: int = 1,
) -> str | NoContent:
    """Run a one-off pipeline over ``lines``."""
    pipeline = SummarizationPipeline(llm, max_chunk_chars=max_chunk_chars, concurrency=concurrency)
    return await pipeline.summarize(lines)

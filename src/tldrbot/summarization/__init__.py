"""Summarization system for channel history."""

from .chunking import MAX_CHUNK_SIZE, chunk_lines, line_size
from .summarizer import (
    AggregateSummarizer,
    ChunkSummarizer,
    CompletionService,
    build_aggregate_prompt,
    build_chunk_prompt,
)
from .pipeline import NO_CONTENT, NoContent, SummarizationFailed, SummarizationPipeline, summarize
from .timeframes import extract_mention_timeframe, parse_timeframe

__all__ = [
    "MAX_CHUNK_SIZE",
    "chunk_lines",
    "line_size",
    "AggregateSummarizer",
    "ChunkSummarizer",
    "CompletionService",
    "build_aggregate_prompt",
    "build_chunk_prompt",
    "NO_CONTENT",
    "NoContent",
    "SummarizationFailed",
    "SummarizationPipeline",
    "summarize",
    "extract_mention_timeframe",
    "parse_timeframe",
]

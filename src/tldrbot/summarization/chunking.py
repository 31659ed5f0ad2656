"""Greedy, order-preserving chunking of chat lines."""

from collections.abc import Sequence

from tldrbot import settings

MAX_CHUNK_SIZE = settings.MAX_CHUNK_CHARS


def line_size(line: str) -> int:
    """Size units a line occupies in a chunk: its length plus one separator."""
    return len(line) + 1


def chunk_lines(lines: Sequence[str], budget: int = MAX_CHUNK_SIZE) -> list[list[str]]:
    """
    Split lines into consecutive chunks whose total size stays within budget.

    A line that is larger than the budget on its own still gets a chunk of
    its own; it is never dropped or cut. Concatenating the returned chunks
    reproduces ``lines`` exactly.

    Args:
        lines: Formatted chat lines, oldest first
        budget: Maximum size units per chunk

    Returns:
        List of non-empty chunks, empty when ``lines`` is empty
    """
    if budget <= 0:
        raise ValueError(f"budget must be positive, got {budget}")

    chunks: list[list[str]] = []
    current: list[str] = []
    current_size = 0

    for line in lines:
        size = line_size(line)
        if current and current_size + size > budget:
            chunks.append(current)
            current = [line]
            current_size = size
        else:
            current.append(line)
            current_size += size

    if current:
        chunks.append(current)

    return chunks

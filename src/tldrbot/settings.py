"""Centralized settings for the summarize bot.

Non-secret, stable texts (prompts, user-facing replies) live here in source
control. Tunables are read from the environment so deployments can override
them through .env. Secrets (API keys, tokens) must remain in .env.
"""

from __future__ import annotations

import os


def _int_from_env(name: str, default: int) -> int:
    raw = (os.getenv(name, "") or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _hour_from_env(name: str, default: int) -> int:
    """Read an hour of day, clamped to 0-23."""
    return min(23, max(0, _int_from_env(name, default)))


def _flag_from_env(name: str, default: bool) -> bool:
    raw = (os.getenv(name, "") or "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


# --------------------- Completion backend ---------------------

SUMMARY_API: str = os.getenv("SUMMARY_API", "openai").strip().lower()
SUMMARY_MODEL: str = os.getenv("SUMMARY_MODEL", "gpt-4o").strip()

# --------------------- Pipeline tunables ---------------------

# ~4 chars = 1 token, so 6000 chars is ~1500 tokens: safe for an 8k context.
MAX_CHUNK_CHARS: int = _int_from_env("SUMMARY_MAX_CHUNK_CHARS", 6000)
FETCH_LIMIT: int = _int_from_env("SUMMARY_FETCH_LIMIT", 100)
CONCURRENCY: int = max(1, _int_from_env("SUMMARY_CONCURRENCY", 1))
SUMMARY_TIMEOUT: int = _int_from_env("SUMMARY_TIMEOUT", 120)
MORNING_HOUR: int = _hour_from_env("SUMMARY_MORNING_HOUR", 6)

# --------------------- Reply delivery ---------------------

INTERACTION_FALLBACK: bool = _flag_from_env("SUMMARY_INTERACTION_FALLBACK", True)
CHANNEL_FALLBACK: bool = _flag_from_env("SUMMARY_CHANNEL_FALLBACK", False)

DISCORD_MESSAGE_LIMIT = 2000

# --------------------- Prompts ---------------------

SUMMARIZER_SYSTEM_PROMPT: str = (
    "You are a helpful summarizer for a discord server. "
    "Your role is to give a TLDR of conversations"
)

CHUNK_INSTRUCTION: str = (
    "Summarize the following messages into bullet points (and short paragraphs if needed). "
    "Try not to make the summary or bullet points longer than the messages themselves. "
    "Reading the summary should be quicker than reading the messages themselves.\n"
    "If possible, group the points by the users that made them."
)

AGGREGATE_INSTRUCTION: str = (
    "We have multiple chunk summaries. Combine them into one cohesive summary with bullet points. "
    "The chunks are chat messages that are potentially grouped by users. "
    "Combine each users' point to maintain that grouping."
)

# --------------------- User-facing replies ---------------------

FAILURE_MESSAGE = "Sorry, I ran into an error."
NO_CONTENT_MESSAGE = "No messages to summarize in that timeframe."
NOT_TEXT_CHANNEL_MESSAGE = "I can only summarize in text channels!"

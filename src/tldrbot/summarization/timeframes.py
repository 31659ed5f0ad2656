"""Timeframe phrase parsing for summarize requests."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from tldrbot import settings

_MENTION_PATTERN = re.compile(r"summarize\s+(.*)", re.DOTALL)


def parse_timeframe(timeframe: str | None, now: datetime | None = None) -> datetime:
    """
    Turn a timeframe phrase into the earliest time to include.

    Recognized phrases (case-insensitive, matched anywhere in the text):
    - "last hour": one hour before now
    - "this morning": today at the configured morning hour
    - "last day": 24 hours before now
    Anything else, including no phrase at all, falls back to the last hour.

    Args:
        timeframe: User-supplied phrase, may be None
        now: Reference time (defaults to the current UTC time)

    Returns:
        Timezone-aware datetime
    """
    if now is None:
        now = datetime.now(tz=timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    last_hour = now - timedelta(hours=1)
    if not timeframe:
        return last_hour

    lower = timeframe.lower().strip()

    if "last hour" in lower:
        return last_hour
    if "this morning" in lower:
        return now.replace(hour=settings.MORNING_HOUR, minute=0, second=0, microsecond=0)
    if "last day" in lower:
        return now - timedelta(hours=24)

    return last_hour


def extract_mention_timeframe(content: str) -> str | None:
    """Return the text following "summarize" in a mention, or None."""
    match = _MENTION_PATTERN.search(content.lower())
    if not match:
        return None
    return match.group(1).strip() or None

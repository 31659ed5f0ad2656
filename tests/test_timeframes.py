"""Tests for timeframe phrase parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from tldrbot.summarization.timeframes import extract_mention_timeframe, parse_timeframe


class TestParseTimeframe:
    """Test fixed-phrase lookups."""

    @pytest.mark.parametrize("phrase", [None, "", "   ", "whenever", "last week"])
    def test_unknown_or_missing_defaults_to_last_hour(self, phrase, now):
        assert parse_timeframe(phrase, now=now) == now - timedelta(hours=1)

    def test_last_hour(self, now):
        assert parse_timeframe("last hour", now=now) == now - timedelta(hours=1)

    def test_last_day(self, now):
        assert parse_timeframe("last day", now=now) == now - timedelta(hours=24)

    def test_this_morning_starts_at_six(self, now):
        assert parse_timeframe("this morning", now=now) == datetime(2025, 6, 1, 6, 0, tzinfo=timezone.utc)

    def test_case_insensitive_substring_match(self, now):
        assert parse_timeframe("  What happened in the LAST DAY?", now=now) == now - timedelta(days=1)

    def test_naive_now_is_treated_as_utc(self):
        naive = datetime(2025, 6, 1, 12, 0)
        result = parse_timeframe("last hour", now=naive)

        assert result.tzinfo is not None
        assert result == datetime(2025, 6, 1, 11, 0, tzinfo=timezone.utc)

    def test_default_now_is_aware(self):
        before = datetime.now(tz=timezone.utc)
        result = parse_timeframe(None)

        assert result.tzinfo is not None
        assert before - timedelta(hours=1, seconds=5) <= result <= before


class TestExtractMentionTimeframe:
    """Test mention text parsing."""

    def test_text_after_summarize(self):
        assert extract_mention_timeframe("<@999> Summarize  last hour ") == "last hour"

    def test_no_timeframe(self):
        assert extract_mention_timeframe("<@999> summarize") is None

    def test_no_keyword(self):
        assert extract_mention_timeframe("<@999> hello") is None

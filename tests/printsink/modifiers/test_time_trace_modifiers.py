"""Tests for TimestampModifier and TraceModifier."""

import re
from datetime import UTC, datetime, timedelta, timezone

import pytest

from printsink.modifiers import TimestampModifier, TraceModifier

STAMP_RE = re.compile(r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z\] ")


@pytest.mark.unit
class TestTimestampModifier:
    """Test ISO-8601 UTC stamping."""

    def test_fixed_instant(self):
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

        assert TimestampModifier(at=moment).modify("x") == "[2024-01-02T03:04:05Z] x"

    def test_converts_to_utc(self):
        moment = datetime(2024, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))

        assert TimestampModifier.format(moment) == "2024-01-02T03:04:05Z"

    def test_naive_taken_as_utc(self):
        assert TimestampModifier.format(datetime(2024, 6, 1)) == "2024-06-01T00:00:00Z"

    def test_clock_read_per_call(self):
        moments = iter(
            [
                datetime(2024, 1, 1, tzinfo=UTC),
                datetime(2024, 1, 1, 0, 0, 1, tzinfo=UTC),
            ]
        )
        modifier = TimestampModifier(clock=lambda: next(moments))

        assert modifier.modify("a") == "[2024-01-01T00:00:00Z] a"
        assert modifier.modify("b") == "[2024-01-01T00:00:01Z] b"

    def test_default_clock(self):
        assert STAMP_RE.match(TimestampModifier().modify("now"))


@pytest.mark.unit
class TestTraceModifier:
    """Test source location tagging."""

    def test_format_uses_basename(self):
        modifier = TraceModifier("handle", "/srv/app/views.py", 42)

        assert modifier.modify("hit") == "[views.py -> 42:handle] hit"

    def test_here_captures_caller(self):
        modifier = TraceModifier.here()

        assert modifier.function == "test_here_captures_caller"
        assert modifier.file == __file__

    def test_here_depth(self):
        def helper():
            return TraceModifier.here(depth=1)

        assert helper().function == "test_here_depth"

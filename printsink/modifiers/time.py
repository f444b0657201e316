"""
Timestamp modifier.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from ..output.interface import Modifier

ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TimestampModifier(Modifier):
    """
    Prepend an ISO-8601 UTC timestamp: ``[2024-01-02T03:04:05Z] text``.

    Args:
        at: Fixed instant to stamp every string with. When omitted the
            clock is read on every ``modify`` call.
        clock: Callable returning the current time (default: UTC now)
    """

    def __init__(
        self,
        at: datetime | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.at = at
        self._clock = clock or _utc_now

    def modify(self, string: str) -> str:
        return f"[{self.format(self.at or self._clock())}] {string}"

    @staticmethod
    def format(moment: datetime) -> str:
        """Format ``moment`` in UTC; naive datetimes are taken as UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        return moment.astimezone(UTC).strftime(ISO8601_FORMAT)

    def __repr__(self) -> str:
        return f"TimestampModifier(at={self.at!r})"

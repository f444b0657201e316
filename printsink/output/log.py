"""
System log output.

Forwards writes to a standard-library logger named ``"{subsystem}.{category}"``
at a fixed level. A privacy setting controls whether the text itself reaches
the log or is replaced with a redaction marker.
"""

from __future__ import annotations

import logging
from enum import Enum

from ..constants import LEVEL_NAMES
from ..exceptions import InvalidLogLevelError
from .interface import Output
from .worker import ErrorCallback, SerialWorker


class Privacy(Enum):
    """How much of a written string reaches the log."""

    AUTO = "auto"
    PRIVATE = "private"
    SENSITIVE = "sensitive"
    PUBLIC = "public"


_REDACTED = {
    Privacy.AUTO: "<private>",
    Privacy.PRIVATE: "<private>",
    Privacy.SENSITIVE: "<sensitive>",
}


def resolve_level(level: str | int) -> int:
    """
    Resolve a level name or number to a logging level.

    Raises:
        InvalidLogLevelError: If the name is unknown or the value is not a level
    """
    if isinstance(level, bool):
        raise InvalidLogLevelError(level)
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        if level.isnumeric():
            return int(level)
        resolved = LEVEL_NAMES.get(level.lower())
        if resolved is not None:
            return resolved
    raise InvalidLogLevelError(level)


def resolve_privacy(privacy: Privacy | str) -> Privacy:
    if isinstance(privacy, Privacy):
        return privacy
    try:
        return Privacy(str(privacy).lower())
    except ValueError:
        raise ValueError(f"Invalid privacy: {privacy}") from None


class LogOutput(Output):
    """
    Write to a standard-library logger.

    Example:
        output = LogOutput(subsystem="myapp", category="network", level="debug")
        output.write("connected")     # logged on "myapp.network" at DEBUG

        errors = output.with_level("error").with_privacy("private")
    """

    def __init__(
        self,
        subsystem: str = "printsink",
        category: str = "LogOutput",
        level: str | int = logging.INFO,
        privacy: Privacy | str = Privacy.PUBLIC,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._subsystem = subsystem
        self._category = category
        self._level = resolve_level(level)
        self._privacy = resolve_privacy(privacy)
        self._on_error = on_error
        self._logger = logging.getLogger(f"{subsystem}.{category}")
        self._worker = SerialWorker("log", on_error=on_error)

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @property
    def category(self) -> str:
        return self._category

    @property
    def level(self) -> int:
        return self._level

    @property
    def privacy(self) -> Privacy:
        return self._privacy

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def with_category(self, category: str) -> LogOutput:
        """Same settings, different category (self when unchanged)."""
        if category == self._category:
            return self
        return self._copy(category=category)

    def with_level(self, level: str | int) -> LogOutput:
        """Same settings, different level (self when unchanged)."""
        resolved = resolve_level(level)
        if resolved == self._level:
            return self
        return self._copy(level=resolved)

    def with_privacy(self, privacy: Privacy | str) -> LogOutput:
        """Same settings, different privacy (self when unchanged)."""
        resolved = resolve_privacy(privacy)
        if resolved == self._privacy:
            return self
        return self._copy(privacy=resolved)

    def _copy(self, **overrides: object) -> LogOutput:
        params: dict[str, object] = {
            "subsystem": self._subsystem,
            "category": self._category,
            "level": self._level,
            "privacy": self._privacy,
            "on_error": self._on_error,
        }
        params.update(overrides)
        return LogOutput(**params)  # type: ignore[arg-type]

    def write(self, string: str) -> None:
        self._worker.submit(self._log, string)

    def drain(self, timeout: float | None = None) -> bool:
        return self._worker.drain(timeout)

    def close(self) -> None:
        self._worker.stop()

    def __del__(self) -> None:
        worker = getattr(self, "_worker", None)
        if worker is not None:
            worker.stop(wait=False)

    def _log(self, string: str) -> None:
        self._logger.log(self._level, "%s", _REDACTED.get(self._privacy, string))

    def __repr__(self) -> str:
        return (
            f"LogOutput(subsystem={self._subsystem!r}, category={self._category!r}, "
            f"level={logging.getLevelName(self._level)}, "
            f"privacy={self._privacy.value})"
        )

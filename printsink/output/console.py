"""
Console output.

Writes the raw string, with no terminator added, to a text stream (standard
output unless told otherwise). Writes are serialized on a worker so
concurrent callers never interleave partial strings.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .interface import Output
from .shared import SharedOutputMixin
from .worker import ErrorCallback, SerialWorker


class ConsoleOutput(SharedOutputMixin, Output):
    """
    Write to a console stream.

    Args:
        stream: Target stream. None resolves ``sys.stdout`` at write time,
            so redirections installed later are honored.
        on_error: Optional callback for failures on the worker
    """

    def __init__(
        self, stream: TextIO | None = None, on_error: ErrorCallback | None = None
    ) -> None:
        self._stream = stream
        self._worker = SerialWorker("console", on_error=on_error)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, string: str) -> None:
        self._worker.submit(self._emit, string)

    def drain(self, timeout: float | None = None) -> bool:
        return self._worker.drain(timeout)

    def close(self) -> None:
        self._worker.stop()

    def __del__(self) -> None:
        worker = getattr(self, "_worker", None)
        if worker is not None:
            worker.stop(wait=False)

    def _emit(self, string: str) -> None:
        stream = self.stream
        stream.write(string)
        stream.flush()

    def __repr__(self) -> str:
        name = getattr(self._stream, "name", None) if self._stream else "<stdout>"
        return f"ConsoleOutput(stream={name!r})"

"""
In-memory buffering output.

Writes are appended to a private string on the output's serial worker.
Reading ``buffer`` while writes are pending sees an older value; call
``drain()`` first when an exact value matters.
"""

from __future__ import annotations

from .interface import Output
from .shared import SharedOutputMixin
from .worker import ErrorCallback, SerialWorker


class BufferedOutput(SharedOutputMixin, Output):
    """
    Accumulate writes in memory.

    Separator policy: by default writes are concatenated as-is. With a
    non-empty ``separator`` it is inserted before a write whenever the
    buffer is already non-empty.

    Example:
        output = BufferedOutput()
        output.write("Hello, ")
        output.write("World!")
        output.drain()
        assert output.buffer == "Hello, World!"

        lines = BufferedOutput(separator="\\n")
        lines.write("a")
        lines.write("b")
        lines.drain()
        assert lines.buffer == "a\\nb"
    """

    def __init__(self, separator: str = "", on_error: ErrorCallback | None = None):
        """
        Initialize the buffer.

        Args:
            separator: Text inserted between successive writes
            on_error: Optional callback for failures on the worker
        """
        self._separator = separator
        self._buffer = ""
        self._worker = SerialWorker("buffer", on_error=on_error)

    @property
    def buffer(self) -> str:
        """Current buffer content (eventually consistent)."""
        return self._buffer

    @property
    def separator(self) -> str:
        return self._separator

    def write(self, string: str) -> None:
        self._worker.submit(self._append, string)

    def clear(self) -> BufferedOutput:
        """Empty the buffer once pending writes have been applied."""
        self._worker.submit(self._reset)
        return self

    def drain(self, timeout: float | None = None) -> bool:
        return self._worker.drain(timeout)

    def close(self) -> None:
        self._worker.stop()

    def __del__(self) -> None:
        worker = getattr(self, "_worker", None)
        if worker is not None:
            worker.stop(wait=False)

    def _append(self, string: str) -> None:
        if self._buffer and self._separator:
            self._buffer += self._separator + string
        else:
            self._buffer += string

    def _reset(self) -> None:
        self._buffer = ""

    def __repr__(self) -> str:
        return f"BufferedOutput(separator={self._separator!r})"

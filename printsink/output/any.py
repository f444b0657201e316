"""
Type-erased output.

AnyOutput hides a concrete output behind a single stored ``write`` callable
so heterogeneous outputs can be stored and passed uniformly.
"""

from __future__ import annotations

from collections.abc import Callable

from .interface import Output, close_output, drain_output, require_output


class AnyOutput(Output):
    """
    Box any object with a ``write(str)`` method.

    Writing to the box has the same observable effect as writing to the
    wrapped output. The box keeps the wrapped output alive for as long as it
    lives itself.
    """

    def __init__(self, output: Output) -> None:
        if isinstance(output, AnyOutput):
            output = output._output
        self._output = require_output(output)
        self._write: Callable[[str], None] = self._output.write

    def write(self, string: str) -> None:
        self._write(string)

    def drain(self, timeout: float | None = None) -> bool:
        return drain_output(self._output, timeout)

    def close(self) -> None:
        close_output(self._output)

    def __repr__(self) -> str:
        return f"AnyOutput({self._output!r})"

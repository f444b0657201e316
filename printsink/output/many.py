"""
Fan-out output.

A ManyOutput forwards each write, unchanged, to every child in list order.
Per-child transformations belong on the child (wrap it in a ModifiedOutput
before adding it).

Not thread-safe: concurrent ``add``/``clear``/``write`` calls need external
synchronization.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .interface import Output, close_output, drain_output, require_output


class ManyOutput(Output):
    """
    Forward every write to an ordered list of outputs.

    The fan-out is best effort: there is no atomicity across children and no
    ordering guarantee between them beyond the order calls are made in.

    Example:
        console = ConsoleOutput()
        buffer = BufferedOutput()
        many = ManyOutput(console, buffer)
        many.write("X")
        many.drain()
    """

    def __init__(self, *outputs: Output) -> None:
        self._outputs: list[Output] = [require_output(o) for o in outputs]

    @classmethod
    def of(cls, outputs: Iterable[Output]) -> ManyOutput:
        """Build a ManyOutput from any iterable of outputs."""
        return cls(*outputs)

    def write(self, string: str) -> None:
        for output in list(self._outputs):
            output.write(string)

    def add(self, output: Output) -> ManyOutput:
        """Append an output; it receives subsequent writes only."""
        self._outputs.append(require_output(output))
        return self

    def clear(self) -> ManyOutput:
        """Remove every child; writes become no-ops until outputs are added."""
        self._outputs.clear()
        return self

    @property
    def count(self) -> int:
        return len(self._outputs)

    @property
    def outputs(self) -> tuple[Output, ...]:
        """Snapshot of the children in fan-out order."""
        return tuple(self._outputs)

    def drain(self, timeout: float | None = None) -> bool:
        # Every child gets the full timeout; drained only if all of them are.
        results = [drain_output(o, timeout) for o in self._outputs]
        return all(results)

    def close(self) -> None:
        for output in self._outputs:
            close_output(output)

    def __len__(self) -> int:
        return len(self._outputs)

    def __iter__(self) -> Iterator[Output]:
        return iter(list(self._outputs))

    def __repr__(self) -> str:
        return f"ManyOutput({', '.join(repr(o) for o in self._outputs)})"

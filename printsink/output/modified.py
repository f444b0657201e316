"""
Output wrapper that transforms every write.

``ModifiedOutput(root, modifier).write(s)`` is exactly
``root.write(modifier.modify(s))``. Wrappers nest freely; the wrapped
output's own capabilities are re-exposed through explicit delegation.
"""

from __future__ import annotations

from typing import Any

from .interface import (
    Modifier,
    ModifierLike,
    Output,
    as_modifier,
    close_output,
    drain_output,
    require_output,
)


class ModifiedOutput(Output):
    """
    Compose an output with a modifier.

    Example:
        buffer = BufferedOutput()
        shouting = ModifiedOutput(buffer, UppercaseModifier())
        shouting.write("abc")
        shouting.drain()
        assert shouting.buffer == "ABC"
    """

    def __init__(self, root: Output, modifier: ModifierLike) -> None:
        self._root = require_output(root)
        self._modifier = as_modifier(modifier)

    @property
    def root(self) -> Output:
        """The directly wrapped output."""
        return self._root

    @property
    def modifier(self) -> Modifier:
        return self._modifier

    def unwrap(self) -> Output:
        """Return the innermost output that is not a ModifiedOutput."""
        output = self._root
        while isinstance(output, ModifiedOutput):
            output = output.root
        return output

    def write(self, string: str) -> None:
        self._root.write(self._modifier.modify(string))

    def drain(self, timeout: float | None = None) -> bool:
        return drain_output(self._root, timeout)

    def close(self) -> None:
        close_output(self._root)

    # -- delegation to the wrapped output -------------------------------------

    def _delegate(self, name: str) -> Any:
        try:
            return getattr(self._root, name)
        except AttributeError:
            raise AttributeError(
                f"{type(self.unwrap()).__name__} has no attribute '{name}'"
            ) from None

    @property
    def buffer(self) -> str:
        return self._delegate("buffer")

    @property
    def separator(self) -> str:
        return self._delegate("separator")

    @property
    def count(self) -> int:
        return self._delegate("count")

    @property
    def outputs(self) -> tuple[Output, ...]:
        return self._delegate("outputs")

    @property
    def stream(self) -> Any:
        return self._delegate("stream")

    @property
    def path(self) -> Any:
        return self._delegate("path")

    @property
    def encoding(self) -> str:
        return self._delegate("encoding")

    @property
    def closed(self) -> bool:
        return self._delegate("closed")

    @property
    def clipboard(self) -> Any:
        return self._delegate("clipboard")

    @property
    def debounce_interval(self) -> float:
        return self._delegate("debounce_interval")

    @property
    def has_pending_update(self) -> bool:
        return self._delegate("has_pending_update")

    @property
    def subsystem(self) -> str:
        return self._delegate("subsystem")

    @property
    def category(self) -> str:
        return self._delegate("category")

    @property
    def level(self) -> int:
        return self._delegate("level")

    @property
    def privacy(self) -> Any:
        return self._delegate("privacy")

    @property
    def logger(self) -> Any:
        return self._delegate("logger")

    def attribute(self, name: str) -> Any:
        """Read any public attribute of the wrapped output by name."""
        if name.startswith("_"):
            raise AttributeError(f"'{name}' is not a public attribute")
        return self._delegate(name)

    def clear(self) -> ModifiedOutput:
        """Clear the wrapped output and return this wrapper for chaining."""
        self._delegate("clear")()
        return self

    def flush(self) -> bool:
        """Flush the wrapped output (pasteboard outputs apply pending updates)."""
        return self._delegate("flush")()

    def __repr__(self) -> str:
        return f"ModifiedOutput({self._root!r}, {self._modifier!r})"

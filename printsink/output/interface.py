"""
Core capabilities for printsink.

This module defines the two contracts everything else builds on:

- ``Output``: accepts a string and forwards it to some sink
- ``Modifier``: maps a string to a string before it reaches an output

Outputs also carry chaining helpers so that wrappers read left to right:

    output = BufferedOutput().uppercased().prefixed("> ")
    output.write("hello")   # buffer receives "> HELLO"

Wrappers nest, so the helper called last is the outermost wrapper and
transforms the string first: above, the prefix is added and then the
whole line is uppercased.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ..modifiers.color import BackgroundColor, Color, Style
    from ..modifiers.pretty import PrettyFormat
    from .any import AnyOutput
    from .many import ManyOutput
    from .modified import ModifiedOutput


class Modifier:
    """
    A pure transformation applied to text before it is written.

    Subclasses override ``modify``. The base implementation returns the
    string unchanged. Modifiers must accept any string, including the
    empty string, without raising.
    """

    def modify(self, string: str) -> str:
        """Return the transformed string."""
        return string

    def __call__(self, string: str) -> str:
        return self.modify(string)


ModifierLike = Union[Modifier, Callable[[str], str]]


def as_modifier(modifier: ModifierLike) -> Modifier:
    """
    Coerce a modifier or a plain ``str -> str`` callable into a Modifier.

    Raises:
        TypeError: If the value is neither a Modifier nor callable
    """
    if isinstance(modifier, Modifier):
        return modifier
    if callable(modifier):
        from ..modifiers.text import FunctionModifier

        return FunctionModifier(modifier)
    raise TypeError(f"Modifier must be a Modifier or callable, got {type(modifier)}")


class Output:
    """
    A sink that accepts strings.

    Concrete outputs override ``write``. A single instance applies its
    writes in the order ``write`` was called, even when the actual work is
    deferred to a background worker.

    The base ``write`` raises ``NotImplementedError``: an output that never
    overrode it is a programming error, not a runtime condition.
    """

    def write(self, string: str) -> None:
        """Forward a string to the sink."""
        raise NotImplementedError(f"{type(self).__name__} must override write()")

    def drain(self, timeout: float | None = None) -> bool:
        """
        Wait until every write issued so far has been applied.

        Synchronous outputs have nothing pending and return immediately.

        Args:
            timeout: Maximum seconds to wait (None waits forever)

        Returns:
            True if drained, False if the timeout elapsed first
        """
        return True

    def close(self) -> None:
        """Release any resources held by the output."""
        pass

    # -- chaining helpers -----------------------------------------------------

    def modified(self, modifier: ModifierLike) -> ModifiedOutput:
        """Wrap this output so every write passes through ``modifier``."""
        from .modified import ModifiedOutput

        return ModifiedOutput(self, modifier)

    def uppercased(self) -> ModifiedOutput:
        from ..modifiers.text import UppercaseModifier

        return self.modified(UppercaseModifier())

    def prefixed(self, prefix: str) -> ModifiedOutput:
        from ..modifiers.text import PrefixModifier

        return self.modified(PrefixModifier(prefix))

    def suffixed(self, suffix: str) -> ModifiedOutput:
        from ..modifiers.text import SuffixModifier

        return self.modified(SuffixModifier(suffix))

    def labeled(self, label: str) -> ModifiedOutput:
        from ..modifiers.text import LabelModifier

        return self.modified(LabelModifier(label))

    def replacing(self, target: str, replacement: str) -> ModifiedOutput:
        from ..modifiers.text import ReplaceModifier

        return self.modified(ReplaceModifier(target, replacement))

    def filtered(self, predicate: Callable[[str], bool]) -> ModifiedOutput:
        """Blank out writes for which ``predicate`` returns False."""
        from ..modifiers.text import FilterModifier

        return self.modified(FilterModifier(predicate))

    def timestamped(self) -> ModifiedOutput:
        from ..modifiers.time import TimestampModifier

        return self.modified(TimestampModifier())

    def traced(self) -> ModifiedOutput:
        """Tag writes with the file, line and function that called ``traced``."""
        from ..modifiers.trace import TraceModifier

        frame = sys._getframe(1)
        return self.modified(
            TraceModifier(
                function=frame.f_code.co_name,
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
            )
        )

    def pretty_printed(
        self,
        indent: int | str = 2,
        format: PrettyFormat | str = "json",
    ) -> ModifiedOutput:
        from ..modifiers.pretty import PrettyModifier

        return self.modified(PrettyModifier(indent=indent, format=format))

    def colored(
        self,
        foreground: Color | str | None = None,
        background: BackgroundColor | str | None = None,
        styles: tuple[Style | str, ...] = (),
        force: bool | None = None,
    ) -> ModifiedOutput:
        from ..modifiers.color import ColorModifier

        return self.modified(
            ColorModifier(
                foreground=foreground, background=background, styles=styles, force=force
            )
        )

    def with_outputs(self, *outputs: Output) -> ManyOutput:
        """Fan out to this output followed by ``outputs``."""
        from .many import ManyOutput

        return ManyOutput(self, *outputs)

    def erase(self) -> AnyOutput:
        """Hide the concrete type behind an AnyOutput."""
        from .any import AnyOutput

        return AnyOutput(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def require_output(output: Any) -> Output:
    """
    Check that ``output`` satisfies the Output contract.

    Raises:
        TypeError: If ``output`` has no callable ``write``
    """
    if not callable(getattr(output, "write", None)):
        raise TypeError(f"Output must have a write() method, got {type(output)}")
    return output


def drain_output(output: Any, timeout: float | None = None) -> bool:
    """Drain ``output`` if it supports draining; plain writers count as drained."""
    drain = getattr(output, "drain", None)
    if drain is None:
        return True
    return bool(drain(timeout))


def close_output(output: Any) -> None:
    """Close ``output`` if it supports closing."""
    close = getattr(output, "close", None)
    if close is not None:
        close()

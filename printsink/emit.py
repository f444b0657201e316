"""
Print entry point.

``emit(value, to=output)`` renders ``value`` with ``str()``, runs the text
through any modifiers and writes it to ``output`` exactly once, returning
``value`` unchanged so calls can be chained inline:

    total = emit(compute_total(), buffer, LabelModifier("total"))

Modifier order: modifiers are applied in reverse declaration order, so the
first-declared modifier is the outermost one. ``emit(v, out, a, b)`` writes
``a(b(str(v)))``.

Without an output the value goes straight to the builtin ``print()``
(newline terminated, standard output) and modifiers are not applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import Generic, TypeVar

from .output.interface import Modifier, ModifierLike, Output, as_modifier

T = TypeVar("T")


class PrintAction(Generic[T]):
    """
    A deferred print of one value.

    Example:
        action = PrintAction(user, to=buffer, modifiers=[PrefixModifier("> ")])
        action.printable      # "> User(name='ada')"
        same_user = action()  # writes once, returns the subject
    """

    def __init__(
        self,
        subject: T,
        to: Output | None = None,
        modifiers: Iterable[ModifierLike] = (),
    ) -> None:
        self._subject = subject
        self._output = to
        self._modifiers: tuple[Modifier, ...] = tuple(as_modifier(m) for m in modifiers)

    @property
    def subject(self) -> T:
        return self._subject

    @property
    def output(self) -> Output | None:
        return self._output

    @property
    def modifiers(self) -> tuple[Modifier, ...]:
        return self._modifiers

    @property
    def description(self) -> str:
        return str(self._subject)

    @property
    def printable(self) -> str:
        """The text written to the output: the description, modified."""
        text = self.description
        if not self._modifiers:
            return text
        return reduce(lambda acc, m: m.modify(acc), reversed(self._modifiers), text)

    def __call__(self) -> T:
        if self._output is None:
            print(self._subject)
        else:
            self._output.write(self.printable)
        return self._subject

    def __repr__(self) -> str:
        return (
            f"PrintAction({self._subject!r}, to={self._output!r}, "
            f"modifiers={list(self._modifiers)!r})"
        )


def emit(value: T, to: Output | None = None, *modifiers: ModifierLike) -> T:
    """
    Print ``value`` to ``to`` through ``modifiers`` and return ``value``.

    Args:
        value: Anything with a string form
        to: Destination output; None prints to standard output unmodified
        *modifiers: Modifiers (or ``str -> str`` callables), first is outermost

    Returns:
        ``value``, unchanged
    """
    return PrintAction(value, to, modifiers)()

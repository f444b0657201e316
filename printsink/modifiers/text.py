"""
Plain text modifiers.

Each modifier is a small immutable object; the matching Output helper
(``uppercased()``, ``prefixed()``, ...) wraps an output with it.
"""

from __future__ import annotations

from collections.abc import Callable

from ..output.interface import Modifier


class UppercaseModifier(Modifier):
    def modify(self, string: str) -> str:
        return string.upper()

    def __repr__(self) -> str:
        return "UppercaseModifier()"


class PrefixModifier(Modifier):
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def modify(self, string: str) -> str:
        return self.prefix + string

    def __repr__(self) -> str:
        return f"PrefixModifier({self.prefix!r})"


class SuffixModifier(Modifier):
    def __init__(self, suffix: str) -> None:
        self.suffix = suffix

    def modify(self, string: str) -> str:
        return string + self.suffix

    def __repr__(self) -> str:
        return f"SuffixModifier({self.suffix!r})"


class LabelModifier(Modifier):
    """Render ``label = value`` with the label lowercased."""

    def __init__(self, label: str) -> None:
        self.label = label

    def modify(self, string: str) -> str:
        return f"{self.label.lower()} = {string}"

    def __repr__(self) -> str:
        return f"LabelModifier({self.label!r})"


class ReplaceModifier(Modifier):
    """Replace every occurrence of ``target``. An empty target changes nothing."""

    def __init__(self, target: str, replacement: str) -> None:
        self.target = target
        self.replacement = replacement

    def modify(self, string: str) -> str:
        if not self.target:
            return string
        return string.replace(self.target, self.replacement)

    def __repr__(self) -> str:
        return f"ReplaceModifier({self.target!r}, {self.replacement!r})"


class FilterModifier(Modifier):
    """
    Keep strings the predicate accepts; blank out the rest.

    A rejected string still produces a write, of the empty string.
    """

    def __init__(self, predicate: Callable[[str], bool]) -> None:
        self.predicate = predicate

    def modify(self, string: str) -> str:
        return string if self.predicate(string) else ""


class FunctionModifier(Modifier):
    """Adapt a plain ``str -> str`` callable."""

    def __init__(self, func: Callable[[str], str]) -> None:
        if not callable(func):
            raise TypeError(f"FunctionModifier needs a callable, got {type(func)}")
        self.func = func

    def modify(self, string: str) -> str:
        return self.func(string)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"FunctionModifier({name})"

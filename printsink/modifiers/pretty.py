"""
Pretty-printing modifier for structured text.

Three formats are supported:

- JSON: valid JSON is re-rendered with sorted keys and the configured
  indentation; anything else falls back to STRUCTURED
- STRUCTURED: brackets, braces and commas outside single- or double-quoted
  literals start new indented lines and other whitespace is dropped; works
  on JSON-like text such as Python reprs
- MINIMAL: runs of whitespace collapse to a single space
"""

from __future__ import annotations

import json
import re
from enum import Enum

from ..output.interface import Modifier

_WHITESPACE_RE = re.compile(r"\s+")


class PrettyFormat(Enum):
    JSON = "json"
    STRUCTURED = "structured"
    MINIMAL = "minimal"


def _resolve_indent(indent: int | str) -> str:
    if isinstance(indent, bool):
        raise ValueError(f"Invalid indent: {indent!r}")
    if isinstance(indent, int):
        if indent < 0:
            raise ValueError(f"Indent must be >= 0, got {indent}")
        return " " * indent
    if indent in ("tab", "tabs"):
        return "\t"
    if isinstance(indent, str) and indent.strip(" \t") == "":
        return indent
    raise ValueError(f"Invalid indent: {indent!r}")


class PrettyModifier(Modifier):
    """
    Re-indent structured text.

    Args:
        indent: Spaces per level, or ``"\\t"`` / ``"tabs"`` for tabs
        format: One of PrettyFormat (or its value)

    Example:
        >>> PrettyModifier().modify('{"b": 1, "a": [1, 2]}')
        '{\\n  "a": [\\n    1,\\n    2\\n  ],\\n  "b": 1\\n}'
    """

    def __init__(
        self, indent: int | str = 2, format: PrettyFormat | str = PrettyFormat.JSON
    ) -> None:
        self.indent = _resolve_indent(indent)
        self.format = PrettyFormat(format)

    def modify(self, string: str) -> str:
        if self.format is PrettyFormat.JSON:
            return self._format_json(string)
        if self.format is PrettyFormat.STRUCTURED:
            return self._format_structured(string)
        return self._format_minimal(string)

    def _format_json(self, string: str) -> str:
        try:
            obj = json.loads(string.strip())
            return json.dumps(
                obj, indent=self.indent, sort_keys=True, ensure_ascii=False
            )
        except (ValueError, TypeError, RecursionError):
            return self._format_structured(string)

    def _format_structured(self, string: str) -> str:
        out: list[str] = []
        depth = 0
        quote: str | None = None
        escape_next = False

        def newline() -> None:
            out.append("\n" + self.indent * depth)

        for char in string:
            if escape_next:
                out.append(char)
                escape_next = False
            elif char == "\\":
                out.append(char)
                escape_next = True
            elif quote is not None:
                out.append(char)
                if char == quote:
                    quote = None
            elif char in "\"'":
                out.append(char)
                quote = char
            elif char in "{[":
                out.append(char)
                depth += 1
                newline()
            elif char in "}]":
                depth = max(0, depth - 1)
                text = "".join(out).rstrip()
                out = [text]
                newline()
                out.append(char)
            elif char == ",":
                out.append(char)
                newline()
            elif char == ":":
                out.append(": ")
            elif char.isspace():
                continue
            else:
                out.append(char)
        return "".join(out)

    @staticmethod
    def _format_minimal(string: str) -> str:
        return _WHITESPACE_RE.sub(" ", string).strip()

    def __repr__(self) -> str:
        return f"PrettyModifier(indent={self.indent!r}, format={self.format.value!r})"

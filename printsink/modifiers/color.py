"""
ANSI color modifier.

Wraps text in SGR escape sequences when the process is writing to a color
capable terminal, and leaves it untouched otherwise.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from ..constants import ESCAPE, RESET
from ..output.interface import Modifier


class Color(Enum):
    """Foreground colors (SGR codes)."""

    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"
    BRIGHT_BLACK = "90"
    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_BLUE = "94"
    BRIGHT_MAGENTA = "95"
    BRIGHT_CYAN = "96"
    BRIGHT_WHITE = "97"


class BackgroundColor(Enum):
    """Background colors (SGR codes)."""

    BLACK = "40"
    RED = "41"
    GREEN = "42"
    YELLOW = "43"
    BLUE = "44"
    MAGENTA = "45"
    CYAN = "46"
    WHITE = "47"
    BRIGHT_BLACK = "100"
    BRIGHT_RED = "101"
    BRIGHT_GREEN = "102"
    BRIGHT_YELLOW = "103"
    BRIGHT_BLUE = "104"
    BRIGHT_MAGENTA = "105"
    BRIGHT_CYAN = "106"
    BRIGHT_WHITE = "107"


class Style(Enum):
    BOLD = "1"
    DIM = "2"
    ITALIC = "3"
    UNDERLINE = "4"
    BLINK = "5"
    REVERSE = "7"
    STRIKETHROUGH = "9"


def _by_name(enum_cls: type[Enum], value: Enum | str) -> Enum:
    """Accept an enum member or its name, case-insensitively ("bright-red" ok)."""
    if isinstance(value, enum_cls):
        return value
    name = str(value).strip().upper().replace("-", "_")
    try:
        return enum_cls[name]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__}: {value!r}") from None


def is_color_terminal() -> bool:
    """
    Determine if color output should be used.

    NO_COLOR (https://no-color.org/) disables and FORCE_COLOR enables
    unconditionally. Otherwise stdout must be a TTY and the terminal must
    advertise color support.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if not sys.stdout.isatty():
        return False
    term = os.environ.get("TERM", "")
    return (
        "color" in term
        or "xterm" in term
        or term in ("screen", "tmux")
        or "COLORTERM" in os.environ
    )


class ColorModifier(Modifier):
    """
    Color text with ANSI escape codes.

    Args:
        foreground: Text color
        background: Background color
        styles: Text styles (bold, underline, ...)
        force: True/False to bypass terminal detection, None to auto-detect

    Example:
        ColorModifier(Color.RED, styles=(Style.BOLD,), force=True).modify("x")
        # "\\x1b[31;1mx\\x1b[0m"
    """

    def __init__(
        self,
        foreground: Color | str | None = None,
        background: BackgroundColor | str | None = None,
        styles: tuple[Style | str, ...] | list[Style | str] = (),
        force: bool | None = None,
    ) -> None:
        self.foreground = _by_name(Color, foreground) if foreground else None
        self.background = _by_name(BackgroundColor, background) if background else None
        self.styles = tuple(_by_name(Style, s) for s in styles)
        self.force = force

    @property
    def codes(self) -> list[str]:
        codes = []
        if self.foreground is not None:
            codes.append(self.foreground.value)
        if self.background is not None:
            codes.append(self.background.value)
        codes.extend(style.value for style in self.styles)
        return codes

    def modify(self, string: str) -> str:
        enabled = self.force if self.force is not None else is_color_terminal()
        codes = self.codes
        if not enabled or not codes:
            return string
        return f"{ESCAPE}{';'.join(codes)}m{string}{RESET}"

    # -- presets ----------------------------------------------------------------

    @classmethod
    def error(cls, force: bool | None = None) -> ColorModifier:
        return cls(Color.BRIGHT_RED, styles=(Style.BOLD,), force=force)

    @classmethod
    def warning(cls, force: bool | None = None) -> ColorModifier:
        return cls(Color.BRIGHT_YELLOW, styles=(Style.BOLD,), force=force)

    @classmethod
    def success(cls, force: bool | None = None) -> ColorModifier:
        return cls(Color.BRIGHT_GREEN, styles=(Style.BOLD,), force=force)

    @classmethod
    def info(cls, force: bool | None = None) -> ColorModifier:
        return cls(Color.BRIGHT_BLUE, force=force)

    @classmethod
    def debug(cls, force: bool | None = None) -> ColorModifier:
        return cls(Color.WHITE, styles=(Style.DIM,), force=force)

    def __repr__(self) -> str:
        return f"ColorModifier(codes={self.codes!r}, force={self.force!r})"

"""
Modifiers: string-to-string transformations applied before a write.
"""

from ..output.interface import Modifier, as_modifier
from .color import BackgroundColor, Color, ColorModifier, Style, is_color_terminal
from .pretty import PrettyFormat, PrettyModifier
from .text import (
    FilterModifier,
    FunctionModifier,
    LabelModifier,
    PrefixModifier,
    ReplaceModifier,
    SuffixModifier,
    UppercaseModifier,
)
from .time import TimestampModifier
from .trace import TraceModifier

__all__ = [
    "BackgroundColor",
    "Color",
    "ColorModifier",
    "FilterModifier",
    "FunctionModifier",
    "LabelModifier",
    "Modifier",
    "PrefixModifier",
    "PrettyFormat",
    "PrettyModifier",
    "ReplaceModifier",
    "Style",
    "SuffixModifier",
    "TimestampModifier",
    "TraceModifier",
    "UppercaseModifier",
    "as_modifier",
    "is_color_terminal",
]

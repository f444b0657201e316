"""
Source-location modifier.
"""

from __future__ import annotations

import os
import sys

from ..output.interface import Modifier


class TraceModifier(Modifier):
    """
    Prepend the code location a string was printed from:
    ``[app.py -> 42:handle_request] text``.

    The location is captured once, when the modifier is created.
    """

    def __init__(self, function: str, file: str, line: int) -> None:
        self.function = function
        self.file = file
        self.line = line

    @classmethod
    def here(cls, depth: int = 0) -> TraceModifier:
        """
        Capture the location of the caller.

        Args:
            depth: Frames to walk up from the caller of ``here`` (0 = caller)
        """
        frame = sys._getframe(depth + 1)
        return cls(
            function=frame.f_code.co_name,
            file=frame.f_code.co_filename,
            line=frame.f_lineno,
        )

    def modify(self, string: str) -> str:
        file_name = os.path.basename(self.file)
        return f"[{file_name} -> {self.line}:{self.function}] {string}"

    def __repr__(self) -> str:
        return f"TraceModifier({self.function!r}, {self.file!r}, {self.line})"

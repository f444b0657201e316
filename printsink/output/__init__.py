"""
Outputs: where printed text ends up.

Composition:
    Output, Modifier     - base capabilities
    ModifiedOutput       - transform every write
    ManyOutput           - fan out to several outputs
    AnyOutput            - hide the concrete output type

Stateful sinks (each with its own serial worker):
    BufferedOutput, ConsoleOutput, FileOutput, PasteboardOutput, LogOutput
"""

from .any import AnyOutput
from .buffer import BufferedOutput
from .console import ConsoleOutput
from .file import FileOutput
from .interface import Modifier, ModifierLike, Output, as_modifier
from .log import LogOutput, Privacy
from .many import ManyOutput
from .modified import ModifiedOutput
from .pasteboard import (
    Clipboard,
    MemoryClipboard,
    PasteboardOutput,
    SystemClipboard,
)
from .worker import SerialWorker

__all__ = [
    "AnyOutput",
    "BufferedOutput",
    "Clipboard",
    "ConsoleOutput",
    "FileOutput",
    "LogOutput",
    "ManyOutput",
    "MemoryClipboard",
    "Modifier",
    "ModifierLike",
    "ModifiedOutput",
    "Output",
    "PasteboardOutput",
    "Privacy",
    "SerialWorker",
    "SystemClipboard",
    "as_modifier",
]

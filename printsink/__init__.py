from importlib.metadata import PackageNotFoundError, version

from .config import OutputConfig
from .emit import PrintAction, emit
from .exceptions import (
    CannotCreateFileError,
    ConfigError,
    FileUnavailableError,
    InvalidLogLevelError,
    InvalidPathError,
    OutputConstructionError,
    OutputError,
    PathIsDirectoryError,
    PrintSinkError,
)
from .modifiers import (
    BackgroundColor,
    Color,
    ColorModifier,
    FilterModifier,
    FunctionModifier,
    LabelModifier,
    PrefixModifier,
    PrettyFormat,
    PrettyModifier,
    ReplaceModifier,
    Style,
    SuffixModifier,
    TimestampModifier,
    TraceModifier,
    UppercaseModifier,
)
from .output import (
    AnyOutput,
    BufferedOutput,
    Clipboard,
    ConsoleOutput,
    FileOutput,
    LogOutput,
    ManyOutput,
    MemoryClipboard,
    Modifier,
    ModifiedOutput,
    Output,
    PasteboardOutput,
    Privacy,
    SerialWorker,
    SystemClipboard,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("printsink")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Entry point
    "emit",
    "PrintAction",
    # Capabilities and wrappers
    "Output",
    "Modifier",
    "ModifiedOutput",
    "ManyOutput",
    "AnyOutput",
    # Stateful outputs
    "BufferedOutput",
    "ConsoleOutput",
    "FileOutput",
    "PasteboardOutput",
    "LogOutput",
    "Privacy",
    "Clipboard",
    "SystemClipboard",
    "MemoryClipboard",
    "SerialWorker",
    # Modifiers
    "UppercaseModifier",
    "PrefixModifier",
    "SuffixModifier",
    "LabelModifier",
    "ReplaceModifier",
    "FilterModifier",
    "FunctionModifier",
    "TimestampModifier",
    "TraceModifier",
    "PrettyModifier",
    "PrettyFormat",
    "ColorModifier",
    "Color",
    "BackgroundColor",
    "Style",
    # Configuration
    "OutputConfig",
    # Exceptions
    "PrintSinkError",
    "ConfigError",
    "InvalidLogLevelError",
    "OutputError",
    "OutputConstructionError",
    "InvalidPathError",
    "PathIsDirectoryError",
    "CannotCreateFileError",
    "FileUnavailableError",
]

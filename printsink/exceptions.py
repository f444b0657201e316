"""
Unified exception hierarchy for printsink.

This module provides a consistent exception hierarchy for all library errors,
making it easier to catch and handle printsink-specific exceptions.

Only construction and configuration problems are raised to callers. Failures
that happen after an output was built (disk full, clipboard gone) are dropped
by the output's serial worker and never surface here.
"""

from typing import Any


class PrintSinkError(Exception):
    """
    Base exception for all printsink errors.

    Example:
        try:
            output = FileOutput("/var/log")
        except PrintSinkError as e:
            print(f"Cannot log to file: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(PrintSinkError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or too large
        - Invalid YAML syntax
        - Invalid configuration value type
    """

    pass


class InvalidLogLevelError(PrintSinkError):
    """Raised when an invalid log level is specified."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level}")


class OutputError(PrintSinkError):
    """Base for errors raised by outputs."""

    pass


class OutputConstructionError(OutputError):
    """
    An output could not be built.

    Raised synchronously from the constructor; the half-built instance is
    never handed back to the caller.
    """

    pass


class InvalidPathError(OutputConstructionError):
    """The path is empty, malformed, or not a local file location."""

    pass


class PathIsDirectoryError(OutputConstructionError):
    """The path points at an existing directory."""

    pass


class CannotCreateFileError(OutputConstructionError):
    """The file did not exist and could not be created."""

    pass


class FileUnavailableError(OutputConstructionError):
    """The file exists but could not be opened for appending."""

    pass

"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the printsink test suite.
"""

import logging
import shutil
import tempfile
import threading
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from printsink import BufferedOutput, ConsoleOutput, Output, PasteboardOutput

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (threads, filesystem, timers)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full system integration)"
    )
    config.addinivalue_line("markers", "slow: Tests that take >1 second to run")


# =============================================================================
# Test Doubles
# =============================================================================


class RecordingOutput(Output):
    """Synchronous output that records every write, in order."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.closed = False
        self._lock = threading.Lock()

    def write(self, string: str) -> None:
        with self._lock:
            self.writes.append(string)

    def close(self) -> None:
        self.closed = True

    @property
    def text(self) -> str:
        return "".join(self.writes)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="printsink-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def recorder() -> RecordingOutput:
    """A fresh RecordingOutput."""
    return RecordingOutput()


@pytest.fixture
def make_recorder() -> Callable[[], RecordingOutput]:
    """Factory for RecordingOutputs, for tests needing several."""
    return RecordingOutput


@pytest.fixture(autouse=True)
def reset_shared_outputs() -> Generator[None, None, None]:
    """Discard process-wide shared outputs after each test."""
    yield
    BufferedOutput.reset_shared()
    ConsoleOutput.reset_shared()
    PasteboardOutput.reset_shared()


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Restore root logger handlers and level changed by a test."""
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(
            mark.name in ["integration", "property", "e2e"]
            for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)

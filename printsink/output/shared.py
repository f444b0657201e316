"""
Process-wide default instances for stateful outputs.

A class mixing in SharedOutputMixin gets ``shared()``, which creates one
instance per class on first use under a lock, and ``reset_shared()``, which
closes and forgets it. Tests call ``reset_shared()`` in teardown.
"""

from __future__ import annotations

import threading
from typing import Any, TypeVar

T = TypeVar("T", bound="SharedOutputMixin")

_shared_lock = threading.Lock()


class SharedOutputMixin:
    """Init-once shared instance with an explicit teardown hook."""

    @classmethod
    def _create_shared(cls: type[T]) -> T:
        """Build the shared instance. Override when defaults need arguments."""
        return cls()

    @classmethod
    def shared(cls: type[T]) -> T:
        """Return the process-wide instance, creating it on first call."""
        with _shared_lock:
            instance = cls.__dict__.get("_shared_instance")
            if instance is None:
                instance = cls._create_shared()
                cls._shared_instance = instance  # type: ignore[attr-defined]
            return instance

    @classmethod
    def reset_shared(cls) -> None:
        """Close and discard the shared instance, if one was created."""
        with _shared_lock:
            instance: Any = cls.__dict__.get("_shared_instance")
            if instance is not None:
                del cls._shared_instance  # type: ignore[attr-defined]
        if instance is not None:
            instance.close()

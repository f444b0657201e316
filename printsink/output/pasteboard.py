"""
Clipboard (pasteboard) output with debounced updates.

Every write is appended to a private buffer on the output's serial worker,
then a clipboard update carrying the whole buffer is scheduled after a short
delay. A newer write cancels the pending update and schedules its own, so a
burst of writes collapses into a single clipboard update.

The clipboard itself is pluggable:

- SystemClipboard: the platform clipboard, through pyperclip
- MemoryClipboard: an in-process clipboard that records every update
"""

from __future__ import annotations

import logging
import threading

import pyperclip

from ..constants import DEFAULT_DEBOUNCE_INTERVAL
from .interface import Output
from .shared import SharedOutputMixin
from .worker import ErrorCallback, SerialWorker


class Clipboard:
    """A string clipboard whose content is replaced wholesale."""

    def set_text(self, text: str) -> None:
        raise NotImplementedError(f"{type(self).__name__} must override set_text()")

    def get_text(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} must override get_text()")


class SystemClipboard(Clipboard):
    """
    The platform clipboard.

    Availability is only known when the clipboard is used: on a headless
    machine ``set_text`` raises ``pyperclip.PyperclipException``, which a
    PasteboardOutput drops like any other write failure.
    """

    def set_text(self, text: str) -> None:
        pyperclip.copy(text)

    def get_text(self) -> str:
        return pyperclip.paste()


class MemoryClipboard(Clipboard):
    """In-process clipboard keeping the history of updates."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._updates: list[str] = []
        self._lock = threading.Lock()

    def set_text(self, text: str) -> None:
        with self._lock:
            self._text = text
            self._updates.append(text)

    def get_text(self) -> str:
        with self._lock:
            return self._text

    @property
    def updates(self) -> list[str]:
        """Every value ever set, oldest first."""
        with self._lock:
            return list(self._updates)

    @property
    def update_count(self) -> int:
        with self._lock:
            return len(self._updates)


class PasteboardOutput(SharedOutputMixin, Output):
    """
    Mirror the accumulated writes onto a clipboard.

    Writes are concatenated as-is. ``clear()`` empties the buffer and
    schedules a (debounced) update that empties the clipboard.

    Example:
        clipboard = MemoryClipboard()
        output = PasteboardOutput(clipboard, debounce_interval=0.05)
        for part in ("a", "b", "c"):
            output.write(part)
        output.drain()
        assert clipboard.updates == ["abc"]
    """

    def __init__(
        self,
        clipboard: Clipboard | None = None,
        debounce_interval: float = DEFAULT_DEBOUNCE_INTERVAL,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """
        Initialize the output.

        Args:
            clipboard: Target clipboard (default: SystemClipboard)
            debounce_interval: Seconds to wait for more writes before updating
            on_error: Optional callback for buffer or clipboard failures
        """
        if debounce_interval < 0:
            raise ValueError(
                f"debounce_interval must be >= 0, got {debounce_interval}"
            )
        self._clipboard = clipboard if clipboard is not None else SystemClipboard()
        self._debounce_interval = debounce_interval
        self._on_error = on_error
        self._buffer = ""
        self._worker = SerialWorker("pasteboard", on_error=on_error)

        # Pending debounced update. The generation changes whenever the
        # pending update is replaced, cancelled or applied. Clipboard updates
        # happen under the lock.
        self._timer_lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._pending_content = ""
        self._generation = 0
        self._lg = logging.getLogger(__name__)

    @classmethod
    def general(cls) -> PasteboardOutput:
        """The shared output bound to the system clipboard."""
        return cls.shared()

    @property
    def buffer(self) -> str:
        """Current buffer content (eventually consistent)."""
        return self._buffer

    @property
    def clipboard(self) -> Clipboard:
        return self._clipboard

    @property
    def debounce_interval(self) -> float:
        return self._debounce_interval

    @property
    def has_pending_update(self) -> bool:
        with self._timer_lock:
            return self._timer is not None

    def write(self, string: str) -> None:
        self._worker.submit(self._append, string)

    def clear(self) -> PasteboardOutput:
        """Empty the buffer and schedule a clipboard clear."""
        self._worker.submit(self._reset)
        return self

    def drain(self, timeout: float | None = None) -> bool:
        """Wait for pending writes, then for the debounced update to land."""
        if not self._worker.drain(timeout):
            return False
        with self._timer_lock:
            timer = self._timer
        if timer is None:
            return True
        timer.join(timeout)
        return not timer.is_alive()

    def flush(self) -> bool:
        """
        Apply the pending clipboard update now instead of waiting.

        Returns:
            True if an update was pending and has been applied
        """
        self._worker.drain()
        with self._timer_lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
            self._generation += 1
            self._update_clipboard(self._pending_content)
        return True

    def close(self) -> None:
        """Stop the worker and apply any pending update."""
        self._worker.stop()
        self.flush()

    def __del__(self) -> None:
        worker = getattr(self, "_worker", None)
        if worker is not None:
            worker.stop(wait=False)

    # -- worker side -----------------------------------------------------------

    def _append(self, string: str) -> None:
        self._buffer += string
        self._schedule_update(self._buffer)

    def _reset(self) -> None:
        self._buffer = ""
        self._schedule_update("")

    def _schedule_update(self, content: str) -> None:
        with self._timer_lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending_content = content
            timer = threading.Timer(
                self._debounce_interval,
                self._fire,
                args=(content, self._generation),
            )
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, content: str, generation: int) -> None:
        with self._timer_lock:
            if generation != self._generation:
                return
            self._update_clipboard(content)
            self._timer = None
            self._generation += 1

    def _update_clipboard(self, content: str) -> None:
        try:
            self._clipboard.set_text(content)
        except Exception as e:
            if self._on_error is None:
                self._lg.debug("dropped clipboard update", exc_info=e)
                return
            try:
                self._on_error(e)
            except Exception as cb_error:
                self._lg.warning(
                    "error callback failed", extra={"exception": cb_error}
                )

    def __repr__(self) -> str:
        return (
            f"PasteboardOutput({type(self._clipboard).__name__}(), "
            f"debounce_interval={self._debounce_interval})"
        )

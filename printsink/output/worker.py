"""
Single-worker serial queue for stateful outputs.

Each stateful output owns one SerialWorker. Callers enqueue work and return
immediately; the worker's daemon thread applies the work strictly one task
at a time, in submission order. The queue is unbounded: a producer that
outruns the worker grows memory without limit.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from typing import Any

ErrorCallback = Callable[[BaseException], None]


class _Barrier:
    """Queue marker that signals when every earlier task has run."""

    def __init__(self) -> None:
        self.event = threading.Event()


_STOP = object()


class SerialWorker:
    """
    Runs submitted callables on one background thread, in FIFO order.

    Usage:
        worker = SerialWorker("buffer")
        worker.submit(state.append, "a")
        worker.submit(state.append, "b")
        worker.drain()          # both appends have run
        worker.stop()

    Exceptions raised by a task are handed to ``on_error`` when given,
    otherwise logged at DEBUG and dropped. They never reach the submitter.

    Thread Safety:
        ``submit``, ``drain`` and ``stop`` may be called from any thread,
        except ``drain`` from the worker thread itself. A stopped worker
        drops further submissions.
    """

    def __init__(
        self, name: str = "printsink", on_error: ErrorCallback | None = None
    ) -> None:
        """
        Initialize the worker. The thread starts on the first submit.

        Args:
            name: Thread name suffix, for debugging
            on_error: Optional callback receiving task exceptions
        """
        self._name = name
        self._on_error = on_error
        self._queue: queue.Queue[Any] = queue.Queue()
        self._thread: threading.Thread | None = None
        self._stopped = False
        self._lock = threading.Lock()
        self._lg = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_alive(self) -> bool:
        """Check if the worker thread is running."""
        return self._thread is not None and self._thread.is_alive()

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def pending(self) -> int:
        """Approximate number of queued, not yet started tasks."""
        return self._queue.qsize()

    def submit(self, task: Callable[..., Any], *args: Any) -> None:
        """Enqueue ``task(*args)`` and return without waiting for it."""
        with self._lock:
            if self._stopped:
                self._lg.debug(
                    "dropped task submitted after stop", extra={"worker": self._name}
                )
                return
            if self._thread is None:
                self._thread = threading.Thread(
                    target=self._run, name=f"printsink-{self._name}", daemon=True
                )
                self._thread.start()
            self._queue.put((task, args))

    def drain(self, timeout: float | None = None) -> bool:
        """
        Block until every task submitted before this call has run.

        On a stopped worker this waits for the thread to finish the tasks
        queued before the stop.

        Args:
            timeout: Maximum seconds to wait (None waits forever)

        Returns:
            True if drained, False on timeout
        """
        self._check_not_worker("drain")
        barrier: _Barrier | None = None
        with self._lock:
            thread = self._thread
            if thread is None:
                return True
            # The barrier must land before the stop marker to ever be set.
            if not self._stopped:
                barrier = _Barrier()
                self._queue.put(barrier)
        if barrier is not None:
            return barrier.event.wait(timeout)
        thread.join(timeout)
        return not thread.is_alive()

    def stop(self, timeout: float | None = 5.0, wait: bool = True) -> None:
        """
        Stop the worker after the tasks already queued have run.

        A join that times out leaves the thread finishing its queue;
        ``drain`` keeps reporting False until it is done.

        Args:
            timeout: Maximum seconds to wait for the thread to finish
            wait: Whether to join the thread (finalizers pass False)
        """
        with self._lock:
            thread = self._thread
            if not self._stopped and thread is not None:
                self._queue.put(_STOP)
            self._stopped = True
        if thread is None:
            return
        if wait and thread is not threading.current_thread():
            thread.join(timeout)

    def _check_not_worker(self, op: str) -> None:
        if self._thread is not None and self._thread is threading.current_thread():
            raise RuntimeError(
                f"SerialWorker.{op}() called from its own worker thread"
            )

    def _run(self) -> None:
        """Main loop - runs in the worker thread until the stop marker."""
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            if isinstance(item, _Barrier):
                item.event.set()
                continue
            task, args = item
            try:
                task(*args)
            except Exception as e:
                self._report(e)
            # An idle worker holds no reference to its output.
            del item, task, args

    def _report(self, exc: BaseException) -> None:
        if self._on_error is None:
            self._lg.debug(
                "dropped failed task", extra={"worker": self._name}, exc_info=exc
            )
            return
        try:
            self._on_error(exc)
        except Exception as e:
            self._lg.warning("error callback failed", extra={"exception": e})

"""Deterministic reactors that run units on the caller's thread."""

from __future__ import annotations

import threading
from collections import deque

from zkdispatch.core.errors import ReactorStoppedError

from .base import Unit, log_fatal_unit


class ManualReactor:
    """FIFO queue drained explicitly with :meth:`run_pending`."""

    def __init__(self, name: str = "manual-reactor"):
        self.name = name
        self.fatal_error: BaseException | None = None
        self._queue: deque[Unit] = deque()
        self._lock = threading.Lock()

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._queue)

    def schedule(self, unit: Unit) -> None:
        with self._lock:
            self._enqueue(unit)

    def run_pending(self) -> int:
        """Run queued units, including ones they schedule, until the queue is empty.

        Returns the number of units run. A unit's exception stops the reactor
        and propagates to the caller.
        """
        ran = 0
        while True:
            with self._lock:
                if not self._queue:
                    return ran
                unit = self._queue.popleft()
            self._run(unit)
            ran += 1

    def _enqueue(self, unit: Unit) -> None:
        if self.fatal_error is not None:
            raise ReactorStoppedError(f"{self.name} stopped after a fatal error") from self.fatal_error
        self._queue.append(unit)

    def _run(self, unit: Unit) -> None:
        try:
            unit()
        except Exception as exc:
            with self._lock:
                self.fatal_error = exc
                self._queue.clear()
            log_fatal_unit(self.name, exc)
            raise


class InlineReactor(ManualReactor):
    """Drains on every ``schedule`` call.

    A unit scheduled from inside a running unit, or from another thread while
    one is draining, is queued and runs after the current unit finishes.
    """

    def __init__(self, name: str = "inline-reactor"):
        super().__init__(name)
        self._draining = False

    def schedule(self, unit: Unit) -> None:
        with self._lock:
            self._enqueue(unit)
            if self._draining:
                return
            self._draining = True
        while True:
            with self._lock:
                if not self._queue:
                    self._draining = False
                    return
                unit = self._queue.popleft()
            try:
                self._run(unit)
            except Exception:
                with self._lock:
                    self._draining = False
                raise

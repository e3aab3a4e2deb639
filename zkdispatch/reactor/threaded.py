"""Reactor backed by one daemon thread draining a FIFO queue."""

from __future__ import annotations

import queue
import threading

from loguru import logger

from zkdispatch.core.errors import ReactorStoppedError

from .base import Unit, log_fatal_unit

_STOP = object()


class ThreadReactor:
    """Single consumer thread; the transport may schedule from any thread.

    The thread starts on the first ``schedule`` call. ``stop`` lets every unit
    scheduled before it run, then joins the thread and re-raises a fatal unit
    error on the caller's thread.
    """

    def __init__(self, name: str = "zkdispatch-reactor", stop_timeout_seconds: float = 5.0):
        self.name = name
        self.stop_timeout_seconds = stop_timeout_seconds
        self.fatal_error: BaseException | None = None
        self._queue: queue.Queue[object] = queue.Queue()
        self._thread: threading.Thread | None = None
        self._stopping = False
        self._lock = threading.RLock()

    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self.running:
                return
            if self.fatal_error is not None:
                raise ReactorStoppedError(f"{self.name} stopped after a fatal error") from self.fatal_error
            self._stopping = False
            self._thread = threading.Thread(target=self._run_loop, name=self.name, daemon=True)
            self._thread.start()
            logger.debug("{}: started", self.name)

    def schedule(self, unit: Unit) -> None:
        with self._lock:
            if self.fatal_error is not None:
                raise ReactorStoppedError(f"{self.name} stopped after a fatal error") from self.fatal_error
            if self._stopping:
                raise ReactorStoppedError(f"{self.name} is stopping")
            if not self.running:
                self.start()
            self._queue.put(unit)

    def in_reactor(self) -> bool:
        """True when called from the reactor thread itself."""
        return threading.current_thread() is self._thread

    def stop(self, timeout: float | None = None) -> None:
        with self._lock:
            thread = self._thread
            if thread is None:
                self._raise_fatal()
                return
            self._stopping = True
            self._queue.put(_STOP)
        if self.in_reactor():
            return
        thread.join(self.stop_timeout_seconds if timeout is None else timeout)
        if thread.is_alive():
            logger.warning("{}: thread did not stop within timeout", self.name)
            return
        with self._lock:
            self._thread = None
            self._stopping = False
        logger.debug("{}: stopped", self.name)
        self._raise_fatal()

    def _raise_fatal(self) -> None:
        if self.fatal_error is not None:
            raise self.fatal_error

    def _run_loop(self) -> None:
        while True:
            unit = self._queue.get()
            if unit is _STOP:
                with self._lock:
                    if self._thread is threading.current_thread():
                        self._thread = None
                    self._stopping = False
                return
            try:
                unit()  # type: ignore[operator]
            except Exception as exc:
                with self._lock:
                    self.fatal_error = exc
                log_fatal_unit(self.name, exc)
                return

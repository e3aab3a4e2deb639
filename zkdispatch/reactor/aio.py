"""Reactor that runs units on an asyncio event loop."""

from __future__ import annotations

import asyncio

from zkdispatch.core.errors import ReactorStoppedError

from .base import Unit, log_fatal_unit


class AsyncioReactor:
    """Schedules units with ``loop.call_soon_threadsafe``.

    Build it inside the loop (or pass ``loop``). With ``stop_on_fatal`` the
    loop is stopped when a unit raises, so ``loop.run_until_complete`` and
    ``asyncio.run`` fail loudly instead of carrying on.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None, *, stop_on_fatal: bool = True):
        self.name = "asyncio-reactor"
        self.loop = loop or asyncio.get_running_loop()
        self.stop_on_fatal = stop_on_fatal
        self.fatal_error: BaseException | None = None

    def schedule(self, unit: Unit) -> None:
        if self.fatal_error is not None:
            raise ReactorStoppedError(f"{self.name} stopped after a fatal error") from self.fatal_error
        if self.loop.is_closed():
            raise ReactorStoppedError(f"{self.name}: event loop is closed")
        self.loop.call_soon_threadsafe(self._run, unit)

    def _run(self, unit: Unit) -> None:
        if self.fatal_error is not None:
            return
        try:
            unit()
        except Exception as exc:
            self.fatal_error = exc
            log_fatal_unit(self.name, exc)
            if self.stop_on_fatal:
                self.loop.stop()

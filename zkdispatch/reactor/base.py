"""Reactor contract shared by every scheduling backend."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from loguru import logger

Unit = Callable[[], None]


@runtime_checkable
class Reactor(Protocol):
    """Runs scheduled units one at a time, in scheduling order.

    ``schedule`` may be called from any thread and never waits for the unit
    to run. An exception escaping a unit is fatal: the reactor records it in
    ``fatal_error`` and refuses further work.
    """

    fatal_error: BaseException | None

    def schedule(self, unit: Unit) -> None: ...


def log_fatal_unit(reactor_name: str, exc: BaseException) -> None:
    logger.opt(exception=exc).critical(
        "{}: scheduled unit raised {}; reactor stopped",
        reactor_name,
        type(exc).__name__,
    )

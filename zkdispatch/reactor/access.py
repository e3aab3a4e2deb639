"""Process-wide default reactor, built lazily from configuration."""

from __future__ import annotations

import threading

from zkdispatch.config.access import get_config
from zkdispatch.config.schema import ReactorConfig

from .base import Reactor
from .manual import InlineReactor
from .threaded import ThreadReactor

_lock = threading.RLock()
_default: Reactor | None = None


def build_reactor(config: ReactorConfig) -> Reactor:
    if config.kind == "inline":
        return InlineReactor()
    return ThreadReactor(name=config.thread_name, stop_timeout_seconds=config.stop_timeout_seconds)


def get_reactor() -> Reactor:
    """Return the default reactor, building it from config on first use."""
    global _default
    with _lock:
        if _default is None:
            _default = build_reactor(get_config().reactor)
        return _default


def set_reactor(reactor: Reactor | None) -> Reactor | None:
    """Install ``reactor`` as the default and return the previous one."""
    global _default
    with _lock:
        previous, _default = _default, reactor
        return previous


def reset_reactor() -> None:
    """Drop the default reactor, stopping it first when it owns a thread."""
    previous = set_reactor(None)
    if isinstance(previous, ThreadReactor):
        previous.stop()

"""Reactors: single-consumer, ordered execution of delivery units."""

from .access import build_reactor, get_reactor, reset_reactor, set_reactor
from .aio import AsyncioReactor
from .base import Reactor, Unit
from .manual import InlineReactor, ManualReactor
from .threaded import ThreadReactor

__all__ = [
    "AsyncioReactor",
    "InlineReactor",
    "ManualReactor",
    "Reactor",
    "ThreadReactor",
    "Unit",
    "build_reactor",
    "get_reactor",
    "reset_reactor",
    "set_reactor",
]

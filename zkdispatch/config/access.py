"""Cached configuration access facade.

Handles read configuration on every construction, so lookups go through a
per-path cache. ``override_config`` pins an in-memory config for embedding
applications and tests that should not touch the filesystem.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from zkdispatch.config.loader import get_config_path, load_config
from zkdispatch.config.schema import DispatchConfig

_lock = threading.RLock()
_cache: dict[str, DispatchConfig] = {}
_overrides: list[DispatchConfig] = []


def _cache_key(config_path: Path | None) -> str:
    return str(Path(config_path or get_config_path()).expanduser().resolve())


def get_config(*, config_path: Path | None = None, force_reload: bool = False) -> DispatchConfig:
    """Return the active override, else the cached config for ``config_path``."""
    with _lock:
        if _overrides and config_path is None:
            return _overrides[-1]
        key = _cache_key(config_path)
        cfg = None if force_reload else _cache.get(key)
        if cfg is None:
            cfg = _cache[key] = load_config(Path(key))
        return cfg


def clear_config_cache(*, config_path: Path | None = None) -> None:
    """Drop one cached entry, or every entry when no path is given."""
    with _lock:
        if config_path is None:
            _cache.clear()
        else:
            _cache.pop(_cache_key(config_path), None)


@contextmanager
def override_config(config: DispatchConfig) -> Iterator[DispatchConfig]:
    """Serve ``config`` from get_config() while the block runs; overrides nest."""
    with _lock:
        _overrides.append(config)
    try:
        yield config
    finally:
        with _lock:
            _overrides.remove(config)

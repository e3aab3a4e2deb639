"""Loguru helpers for consistent zkdispatch logging."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from zkdispatch.config.schema import LoggingConfig

_SINK_IDS: dict[str, int] = {}


def default_log_dir() -> Path:
    return Path.home() / ".zkdispatch" / "logs"


def ensure_log_sink(
    name: str,
    level: str = "INFO",
    path: Path | None = None,
    *,
    rotation: str = "10 MB",
    retention: str = "14 days",
) -> Path:
    """Ensure a rotating log sink for the given name; repeated calls reuse it."""
    log_path = path or default_log_dir() / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation=rotation,
        retention=retention,
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path


def remove_log_sink(name: str) -> bool:
    """Remove a sink added by ensure_log_sink. Returns False when none exists."""
    sink_id = _SINK_IDS.pop(name, None)
    if sink_id is None:
        return False
    logger.remove(sink_id)
    return True


def configure_logging(config: LoggingConfig) -> Path | None:
    """Add the file sink described by LoggingConfig, if any, replacing a previous one."""
    if not config.file:
        return None
    remove_log_sink("zkdispatch")
    return ensure_log_sink(
        "zkdispatch",
        level=config.level,
        path=Path(config.file).expanduser(),
        rotation=config.rotation,
        retention=config.retention,
    )

"""Utility modules."""

from zkdispatch.utils.logging_utils import configure_logging, ensure_log_sink, remove_log_sink

__all__ = ["configure_logging", "ensure_log_sink", "remove_log_sink"]

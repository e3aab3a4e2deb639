"""Configuration module for zkdispatch."""

from zkdispatch.config.loader import load_config, get_config_path, save_config
from zkdispatch.config.schema import DispatchConfig, LoggingConfig, ReactorConfig
from zkdispatch.config.access import get_config, clear_config_cache, override_config

__all__ = [
    "DispatchConfig",
    "LoggingConfig",
    "ReactorConfig",
    "load_config",
    "save_config",
    "get_config_path",
    "get_config",
    "clear_config_cache",
    "override_config",
]

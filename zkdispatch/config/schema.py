"""Configuration schema using Pydantic.

Persisted to ~/.zkdispatch/config.json; every field can be overridden with
ZKDISPATCH_* environment variables (nested with ``__``).
"""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReactorConfig(BaseModel):
    """Default reactor used by handles created without an explicit one."""
    kind: Literal["thread", "inline"] = "thread"
    thread_name: str = "zkdispatch-reactor"
    stop_timeout_seconds: float = Field(default=5.0, gt=0)


class LoggingConfig(BaseModel):
    """Loguru sink settings."""
    level: str = "INFO"
    log_results: bool = True  # Debug-log every submission check and delivery
    file: str | None = None  # Rotating file sink path; stderr only when unset
    rotation: str = "10 MB"
    retention: str = "14 days"


class DispatchConfig(BaseSettings):
    """Root configuration for zkdispatch."""
    reactor: ReactorConfig = Field(default_factory=ReactorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="ZKDISPATCH_",
        env_nested_delimiter="__",
    )

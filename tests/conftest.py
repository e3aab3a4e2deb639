"""Pytest hooks and fixtures."""

import pytest
from loguru import logger

from zkdispatch.config.access import clear_config_cache
from zkdispatch.reactor import InlineReactor, ManualReactor, set_reactor


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config lookups and log files away from the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in ("ZKDISPATCH_REACTOR__KIND", "ZKDISPATCH_LOGGING__LEVEL"):
        monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    previous = set_reactor(None)
    yield home
    set_reactor(previous)
    clear_config_cache()


@pytest.fixture
def inline_reactor():
    return InlineReactor()


@pytest.fixture
def manual_reactor():
    return ManualReactor()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(sink_id)

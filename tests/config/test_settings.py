"""Unit tests for src/config/settings.py"""

import logging
from unittest.mock import patch

import pytest

from src.config.settings import Settings, configure_logging


def test_defaults() -> None:
    config = Settings(_env_file=None)
    assert config.MAX_BUDGET_MINUTES == 59
    assert config.DEFAULT_BUDGET_MINUTES == 10
    assert config.LOG_LEVEL == "INFO"


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_BUDGET_MINUTES", "30")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = Settings(_env_file=None)
    assert config.MAX_BUDGET_MINUTES == 30
    assert config.LOG_LEVEL == "debug"


def test_configure_logging_uses_level() -> None:
    with patch("src.config.settings.logging.basicConfig") as basic_config:
        configure_logging(Settings(LOG_LEVEL="debug", _env_file=None))
    assert basic_config.call_args.kwargs["level"] == "DEBUG"
    assert logging.getLevelName("DEBUG") == logging.DEBUG

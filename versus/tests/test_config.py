"""
Tests for settings and logging setup.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from versus.config import PROJECT_ROOT, Settings, get_settings
from versus.logging_config import configure_logging


def test_defaults():
    settings = Settings()
    assert settings.roster_path == PROJECT_ROOT / "data" / "characters.json"
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("VERSUS_ROSTER_PATH", str(tmp_path / "roster.json"))
    monkeypatch.setenv("VERSUS_LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.roster_path == tmp_path / "roster.json"
        assert settings.log_level == "DEBUG"
    finally:
        get_settings.cache_clear()


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("debug")
    assert logger.name == "versus"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    configure_logging("INFO")

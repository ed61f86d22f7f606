"""Tests for the log-level override read from the environment."""

import logging

import pytest

from config import LOG_CONFIG


class TestLevelFor:
    """LogConfig.level_for() and the DETECTIVE_QUEST_LOG_LEVEL variable."""

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(LOG_CONFIG.env_var, raising=False)
        assert LOG_CONFIG.level_for("WARNING") == "WARNING"

    @pytest.mark.parametrize("raw, expected", [
        ("debug", "DEBUG"),
        ("  info ", "INFO"),
        ("ERROR", "ERROR"),
    ])
    def test_known_name_is_normalised(self, monkeypatch, raw, expected):
        monkeypatch.setenv(LOG_CONFIG.env_var, raw)
        assert LOG_CONFIG.level_for("WARNING") == expected

    @pytest.mark.parametrize("raw", ["VERBOSE", "   ", "loud"])
    def test_unknown_name_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv(LOG_CONFIG.env_var, raw)
        assert LOG_CONFIG.level_for("INFO") == "INFO"

    def test_result_is_accepted_by_logging(self, monkeypatch):
        """Whatever the variable holds, the returned name is a real level."""
        monkeypatch.setenv(LOG_CONFIG.env_var, "VERBOSE")
        level = LOG_CONFIG.level_for(LOG_CONFIG.cli_level)
        assert isinstance(logging.getLevelName(level), int)

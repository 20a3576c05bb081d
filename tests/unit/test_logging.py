"""Unit tests for logging setup."""

import json
import logging

import pytest
import structlog

from txchain.config import ChainSettings
from txchain.utils import configure_logging, setup_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    """Test setup_logging."""

    def test_json_output(self, capsys):
        """Test that the json format emits one JSON object per event."""
        logger = setup_logging("INFO", "json")

        logger.info("Build completed", status=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "Build completed"
        assert event["status"] == 2
        assert event["level"] == "info"

    def test_level_filtering(self, capsys):
        """Test that events below the level are dropped."""
        logger = setup_logging("WARNING", "json")

        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_plain_output(self, capsys):
        """Test the console renderer."""
        logger = setup_logging("DEBUG", "plain")

        logger.debug("Starting build pass", actions=0)

        out = capsys.readouterr().out
        assert "Starting build pass" in out
        assert "actions=0" in out

    def test_root_logger_untouched(self):
        """Test that setup leaves the standard library root logger alone."""
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level

        setup_logging("DEBUG", "json")

        assert root.handlers == handlers
        assert root.level == level


class TestConfigureLogging:
    """Test configure_logging."""

    def test_uses_settings(self, capsys):
        """Test that level and format come from the settings."""
        settings = ChainSettings(log_level="WARNING", log_format="json")
        logger = configure_logging(settings)

        logger.info("hidden")
        logger.warning("Action failed", action="a")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        event = json.loads(lines[0])
        assert event["event"] == "Action failed"
        assert event["action"] == "a"

    def test_reads_environment(self, monkeypatch, capsys):
        """Test that settings are loaded from the environment when omitted."""
        monkeypatch.setenv("TXCHAIN_LOG_FORMAT", "plain")
        monkeypatch.setenv("TXCHAIN_LOG_LEVEL", "ERROR")
        logger = configure_logging()

        logger.warning("hidden")
        logger.error("Build aborted", executed=1)

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "Build aborted" in out
        assert "executed=1" in out

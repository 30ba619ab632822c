"""Tests for logging configuration."""

import json
import logging

import pytest
import structlog

from license_checker.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_level_argument(self) -> None:
        """Test that an explicit level is applied."""
        setup_logging(level="debug")

        assert logging.getLogger("license_checker").level == logging.DEBUG

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that LICENSE_CHECKER_LOG_LEVEL is honored."""
        monkeypatch.setenv("LICENSE_CHECKER_LOG_LEVEL", "WARNING")

        setup_logging()

        assert logging.getLogger("license_checker").level == logging.WARNING

    def test_argument_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an explicit level wins over the environment."""
        monkeypatch.setenv("LICENSE_CHECKER_LOG_LEVEL", "ERROR")

        setup_logging(level="INFO")

        assert logging.getLogger("license_checker").level == logging.INFO

    def test_json_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that the json format emits one JSON object per event on stderr."""
        setup_logging(level="INFO", fmt="json")

        structlog.get_logger("license_checker.test").info("hello", package="lodash")

        captured = capsys.readouterr()
        assert captured.out == ""
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event["event"] == "hello"
        assert event["package"] == "lodash"
        assert event["level"] == "info"
        assert event["logger"] == "license_checker.test"

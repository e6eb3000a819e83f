"""Tests for logging configuration and sensitive data censoring."""

import logging
from unittest.mock import patch

import structlog
import structlog.testing

from traktkit.logger import add_log_level, censor_sensitive_data, configure_logging, get_logger


class TestCensorSensitiveData:
    """Tests for censor_sensitive_data processor."""

    def test_masks_tokens_and_secrets(self):
        event = censor_sensitive_data(
            None,
            "info",
            {
                "event": "trakt_token_exchanged",
                "access_token": "abc",
                "refresh_token": "def",
                "client_secret": "xyz",
                "device_code": "d9c1",
            },
        )

        assert event["event"] == "trakt_token_exchanged"
        assert event["access_token"] == "***"
        assert event["refresh_token"] == "***"
        assert event["client_secret"] == "***"
        assert event["device_code"] == "***"

    def test_exact_keys_only(self):
        event = censor_sensitive_data(
            None,
            "warning",
            {"event": "trakt_api_error", "code": "auth_code", "state": "a1b2", "status_code": 401},
        )

        assert event["code"] == "***"
        assert event["state"] == "***"
        assert event["status_code"] == 401

    def test_nested_dicts(self):
        event = censor_sensitive_data(
            None,
            "debug",
            {
                "event": "trakt_request",
                "headers": {"Authorization": "Bearer abc", "trakt-api-version": "2"},
                "items": [{"token": "abc", "path": "/oauth/revoke"}],
            },
        )

        assert event["headers"]["Authorization"] == "***"
        assert event["headers"]["trakt-api-version"] == "2"
        assert event["items"][0]["token"] == "***"
        assert event["items"][0]["path"] == "/oauth/revoke"


class TestAddLogLevel:
    """Tests for add_log_level processor."""

    def test_warn_renamed(self):
        assert add_log_level(None, "warn", {})["level"] == "warning"

    def test_other_levels(self):
        assert add_log_level(None, "error", {})["level"] == "error"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self):
        configure_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_uses_settings_level(self):
        with patch("traktkit.logger.settings") as mock_settings:
            mock_settings.log_level = "WARNING"
            mock_settings.is_production = False

            configure_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_get_logger(self):
        with structlog.testing.capture_logs() as logs:
            get_logger("traktkit.test").info("trakt_test_event", status_code=200)

        assert logs[0]["event"] == "trakt_test_event"
        assert logs[0]["status_code"] == 200

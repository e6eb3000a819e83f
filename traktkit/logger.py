"""Structured logging configuration using structlog.

Library modules only call ``structlog.get_logger``; applications embedding the
client (and the scripts in this repository) call ``configure_logging`` once to
get JSON output in production or console-friendly output in development.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from traktkit.config import settings

SENSITIVE_KEYS = frozenset(
    {
        "token",
        "password",
        "api_key",
        "secret",
        "authorization",
        "credentials",
        "cookie",
        "device_code",
        "user_code",
    }
)

# Matched as whole keys only ("status_code" must stay visible)
SENSITIVE_EXACT_KEYS = frozenset({"code", "state"})


def add_log_level(_logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add log level to the event dict."""
    if method_name == "warn":
        # Structlog uses "warn", but we want "warning"
        event_dict["level"] = "warning"
    else:
        event_dict["level"] = method_name
    return event_dict


def censor_sensitive_data(
    _logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Censor sensitive data from log events.

    Masks access/refresh tokens, client secrets, device and authorization
    codes, and the CSRF state wherever they appear in the event.
    """

    def _censor_value(key: str, value: Any) -> Any:
        key_lower = key.lower()
        if key_lower in SENSITIVE_EXACT_KEYS:
            return "***"
        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            return "***"
        if isinstance(value, dict):
            return {k: _censor_value(k, v) for k, v in value.items()}
        if isinstance(value, list):
            return [_censor_value(key, item) if isinstance(item, dict) else item for item in value]
        return value

    censored: EventDict = {}
    for key, value in event_dict.items():
        if key == "event":
            censored[key] = value
            continue
        censored[key] = _censor_value(key, value)
    return censored


def configure_logging(level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name. Uses settings.log_level if None.
    """
    log_level = getattr(logging, (level or settings.log_level).upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        censor_sensitive_data,
    ]

    if settings.is_production:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional logger name. If not provided, uses the caller's module name.

    Returns:
        Configured structlog logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("trakt_device_code_issued", user_code="5055CC52")
    """
    return structlog.get_logger(name)

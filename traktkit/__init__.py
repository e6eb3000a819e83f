"""Async typed client for the Trakt.tv API."""

from traktkit.auth import (
    CheckCodeResponse,
    DeviceCodeResponse,
    DeviceCodeStatus,
    TokenResponse,
    TokenState,
    TraktOAuth,
)
from traktkit.client import TraktClient
from traktkit.exceptions import (
    TraktAPIError,
    TraktAuthError,
    TraktConnectionError,
    TraktCSRFError,
    TraktDeviceCodeError,
    TraktError,
    TraktNotConfiguredError,
    TraktNotFoundError,
    TraktRateLimitError,
)
from traktkit.trakt import Trakt

__version__ = "0.1.0"

__all__ = [
    "Trakt",
    "TraktClient",
    "TraktOAuth",
    # Tokens
    "TokenState",
    "TokenResponse",
    "DeviceCodeResponse",
    "DeviceCodeStatus",
    "CheckCodeResponse",
    # Exceptions
    "TraktError",
    "TraktAPIError",
    "TraktAuthError",
    "TraktCSRFError",
    "TraktConnectionError",
    "TraktDeviceCodeError",
    "TraktNotConfiguredError",
    "TraktNotFoundError",
    "TraktRateLimitError",
]

"""OAuth2 authentication for the Trakt API.

Provides the token manager and the token/device code models:
- Authorization code flow with CSRF state validation
- Device code flow with polling
- Token refresh, import/export and revocation
"""

from traktkit.auth.models import (
    CheckCodeResponse,
    DeviceCodeResponse,
    DeviceCodeStatus,
    TokenResponse,
    TokenState,
)
from traktkit.auth.oauth import TraktOAuth

__all__ = [
    "TraktOAuth",
    "TokenState",
    "TokenResponse",
    "DeviceCodeResponse",
    "DeviceCodeStatus",
    "CheckCodeResponse",
]

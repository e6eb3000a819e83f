"""OAuth2 token lifecycle for Trakt.

Covers the authorization code flow (with CSRF state), the device code flow,
token refresh, and import/export/revocation of a session. Tokens are stored
on the ``TraktClient`` so every subsequent API call is authenticated.

Usage:
    async with Trakt(client_id, client_secret) as trakt:
        url = trakt.auth.get_url()
        # ... user approves, redirect carries ?code=...&state=...
        await trakt.auth.exchange_code(code, state)
"""

import asyncio
import secrets
import time
import urllib.parse
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

from traktkit.auth.models import (
    DEVICE_CODE_MESSAGES,
    CheckCodeResponse,
    DeviceCodeResponse,
    DeviceCodeStatus,
    TokenResponse,
    TokenState,
)
from traktkit.exceptions import (
    TraktAPIError,
    TraktAuthError,
    TraktConnectionError,
    TraktCSRFError,
    TraktDeviceCodeError,
)

if TYPE_CHECKING:
    from traktkit.client import TraktClient

logger = structlog.get_logger(__name__)

# Bytes of randomness in the CSRF state (hex encoded, 12 characters)
STATE_BYTES = 6

# RFC 8628 section 3.5: add 5 seconds to the interval on slow_down
SLOW_DOWN_INCREMENT = 5


class TraktOAuth:
    """OAuth2 token manager built on a ``TraktClient``."""

    def __init__(self, client: "TraktClient"):
        self._client = client

    @property
    def token(self) -> TokenState:
        return self._client.token

    # =========================================================================
    # Authorization code flow
    # =========================================================================

    def get_url(self) -> str:
        """Build the authorization URL for user consent.

        A new CSRF state is generated and remembered on every call; the
        previous one is no longer accepted by ``exchange_code``.

        Returns:
            URL to open in the user's browser
        """
        self.token.state = secrets.token_hex(STATE_BYTES)
        params = {
            "response_type": "code",
            "client_id": self._client.client_id,
            "redirect_uri": self._client.redirect_uri,
            "state": self.token.state,
        }
        return f"{self._client.site_url}/oauth/authorize?{urllib.parse.urlencode(params)}"

    async def exchange_code(self, code: str, state: str | None = None) -> TokenResponse:
        """Exchange an authorization code for access and refresh tokens.

        Args:
            code: Code from the redirect after user consent
            state: State from the redirect; checked against the issued one

        Returns:
            Token response; the tokens are stored on the client

        Raises:
            TraktCSRFError: State does not match the one from ``get_url``
        """
        if state and state != self.token.state:
            logger.warning("trakt_oauth_state_mismatch")
            raise TraktCSRFError()

        return await self._exchange(
            {
                "code": code,
                "client_id": self._client.client_id,
                "client_secret": self._client.client_secret,
                "redirect_uri": self._client.redirect_uri,
                "grant_type": "authorization_code",
            }
        )

    async def refresh_token(self) -> TokenResponse:
        """Get a new access token with the stored refresh token.

        Raises:
            TraktAuthError: No refresh token is held
        """
        if not self.token.refresh_token:
            raise TraktAuthError("No refresh token available", status_code=401)

        response = await self._exchange(
            {
                "refresh_token": self.token.refresh_token,
                "client_id": self._client.client_id,
                "client_secret": self._client.client_secret,
                "redirect_uri": self._client.redirect_uri,
                "grant_type": "refresh_token",
            }
        )
        logger.info("trakt_token_refreshed", expires=self.token.expires)
        return response

    async def _exchange(self, payload: dict[str, Any]) -> TokenResponse:
        data = await self._client._post_oauth("/oauth/token", payload)
        response = TokenResponse.model_validate(data)
        self._store(response)
        logger.info("trakt_token_exchanged", grant_type=payload.get("grant_type"))
        return response

    def _store(self, response: TokenResponse) -> None:
        self.token.access_token = response.access_token
        self.token.refresh_token = response.refresh_token
        self.token.expires = response.expires_at_ms

    # =========================================================================
    # Device code flow
    # =========================================================================

    async def get_codes(self) -> DeviceCodeResponse:
        """Start the device flow.

        Show ``user_code`` and ``verification_url`` to the user, then poll
        with ``device_code`` every ``interval`` seconds until ``expires_in``.
        """
        data = await self._client._post_oauth(
            "/oauth/device/code",
            {"client_id": self._client.client_id},
        )
        codes = DeviceCodeResponse.model_validate(data)
        logger.info(
            "trakt_device_code_issued",
            verification_url=codes.verification_url,
            expires_in=codes.expires_in,
            interval=codes.interval,
        )
        return codes

    async def check_codes(self, device_code: str) -> CheckCodeResponse:
        """Poll once for the device token.

        HTTP outcomes are reported through the returned status instead of
        being raised: 200 success, 400 pending, 404 invalid code, 409 already
        used, 410 expired, 418 denied, 429 slow down. Transport failures are
        reported as 500.

        Args:
            device_code: ``device_code`` from ``get_codes``

        Returns:
            Poll outcome; on success the tokens are stored on the client
        """
        payload = {
            "code": device_code,
            "client_id": self._client.client_id,
            "client_secret": self._client.client_secret,
        }
        try:
            data = await self._client._post_oauth("/oauth/device/token", payload)
        except TraktAPIError as e:
            message = DEVICE_CODE_MESSAGES.get(e.status_code) or e.reason or "Unknown error"
            logger.debug("trakt_device_token_poll", status_code=e.status_code)
            return CheckCodeResponse(status=e.status_code, message=message)
        except TraktConnectionError:
            return CheckCodeResponse(status=500, message="Network or server error")

        response = TokenResponse.model_validate(data)
        self._store(response)
        logger.info("trakt_device_authorized")
        return CheckCodeResponse(
            status=DeviceCodeStatus.SUCCESS,
            message=DEVICE_CODE_MESSAGES[DeviceCodeStatus.SUCCESS],
            data=response,
        )

    async def poll_device_token(
        self,
        codes: DeviceCodeResponse,
        interval: float | None = None,
    ) -> TokenResponse:
        """Poll ``check_codes`` until the user approves or the code expires.

        Args:
            codes: Response of ``get_codes``
            interval: Seconds between polls (default: ``codes.interval``)

        Returns:
            Token response of the successful poll

        Raises:
            TraktDeviceCodeError: Denied, invalid, already used, or expired
        """
        wait = float(codes.interval if interval is None else interval)
        deadline = time.monotonic() + codes.expires_in

        while time.monotonic() < deadline:
            await asyncio.sleep(wait)
            result = await self.check_codes(codes.device_code)

            if result.is_success and result.data is not None:
                return result.data
            if result.is_pending:
                continue
            if result.status == DeviceCodeStatus.SLOW_DOWN:
                wait += SLOW_DOWN_INCREMENT
                logger.info("trakt_device_poll_slow_down", interval=wait)
                continue

            logger.warning("trakt_device_poll_failed", status_code=result.status)
            raise TraktDeviceCodeError(result.status, result.message)

        raise TraktDeviceCodeError(
            DeviceCodeStatus.EXPIRED,
            DEVICE_CODE_MESSAGES[DeviceCodeStatus.EXPIRED],
        )

    # =========================================================================
    # Session import/export
    # =========================================================================

    async def import_token(self, token: TokenState | Mapping[str, Any]) -> TokenState:
        """Load a previously exported session, refreshing it if expired.

        Args:
            token: Exported session (access_token, refresh_token, expires)

        Returns:
            The session now held by the client
        """
        if not isinstance(token, TokenState):
            token = TokenState.model_validate(dict(token))

        self.token.access_token = token.access_token
        self.token.expires = token.expires
        self.token.refresh_token = token.refresh_token

        if token.is_expired:
            logger.info("trakt_imported_token_expired")
            await self.refresh_token()

        return self.export_token()

    def export_token(self) -> TokenState:
        """Current session without the pending CSRF state."""
        return TokenState(
            access_token=self.token.access_token,
            expires=self.token.expires,
            refresh_token=self.token.refresh_token,
        )

    async def revoke_token(self) -> None:
        """Revoke the access token on Trakt and forget all credentials.

        Does nothing if no access token is held.
        """
        if not self.token.access_token:
            return

        await self._client._post_oauth(
            "/oauth/revoke",
            {
                "token": self.token.access_token,
                "client_id": self._client.client_id,
                "client_secret": self._client.client_secret,
            },
        )
        self._client.token = TokenState()
        logger.info("trakt_token_revoked")

"""Authenticated request sender for the Trakt API.

Every resource module and the OAuth token manager go through ``TraktClient``:
it owns the ``httpx.AsyncClient``, the application credentials and the
current ``TokenState``, builds Trakt headers and maps HTTP failures to typed
exceptions.

API Documentation: https://trakt.docs.apiary.io/
"""

import math
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any

import httpx
import structlog
from pydantic import BaseModel

from traktkit.auth.models import TokenState
from traktkit.config import settings
from traktkit.exceptions import (
    TraktAPIError,
    TraktAuthError,
    TraktConnectionError,
    TraktNotConfiguredError,
    TraktNotFoundError,
    TraktRateLimitError,
)

logger = structlog.get_logger(__name__)


# =============================================================================
# Constants
# =============================================================================

API_VERSION = "2"

HTTP_METHODS = frozenset({"get", "post", "put", "delete"})


# =============================================================================
# Serialization helpers
# =============================================================================


def to_jsonable(value: Any) -> Any:
    """Convert request parameters to JSON-compatible data.

    Pydantic models are dumped by alias without None fields; None values are
    dropped from mappings at every level.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items() if v is not None}
    if isinstance(value, list | tuple):
        return [to_jsonable(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value


def build_query(params: dict[str, Any] | BaseModel | None) -> dict[str, str | int | float]:
    """Build query string parameters.

    Args:
        params: Raw parameters; None values are omitted

    Returns:
        Parameters ready for httpx, booleans rendered as ``true``/``false``
    """
    if params is None:
        return {}
    data = to_jsonable(params)
    query: dict[str, str | int | float] = {}
    for key, value in data.items():
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        elif isinstance(value, list):
            query[key] = ",".join(str(v) for v in value)
        else:
            query[key] = value
    return query


def parse_retry_after(value: str | None, default: int = 1) -> int:
    """Parse a ``Retry-After`` header into whole seconds.

    Accepts delay seconds (fractions are rounded up) or an HTTP-date; anything
    unparseable falls back to ``default``. Dates in the past give 0.
    """
    if not value:
        return default
    try:
        return max(0, math.ceil(float(value)))
    except (ValueError, OverflowError):
        pass
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return default
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    delay = (retry_at - datetime.now(timezone.utc)).total_seconds()
    return max(0, math.ceil(delay))


# =============================================================================
# Client
# =============================================================================


class TraktClient:
    """Async sender for Trakt API requests.

    Example:
        async with TraktClient(client_id="...") as client:
            movie = await client._call("get", "/movies/tron-legacy-2010")
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        api_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        token: TokenState | None = None,
    ):
        """Initialize Trakt client.

        Args:
            client_id: Trakt application id. Uses settings.trakt_client_id if None.
            client_secret: Application secret. Uses settings.trakt_client_secret if None.
            redirect_uri: OAuth redirect URI. Uses settings.trakt_redirect_uri if None.
            api_url: API base URL. Uses settings.trakt_api_url if None.
            user_agent: User-Agent header. Uses settings.trakt_user_agent if None.
            timeout: Request timeout in seconds. Uses settings.request_timeout if None.
            token: Previously obtained credentials.

        Raises:
            TraktNotConfiguredError: No client id given or configured
        """
        self.client_id = client_id or settings.trakt_client_id
        if not self.client_id:
            raise TraktNotConfiguredError(
                "Trakt client id is not configured (set TRAKT_CLIENT_ID or pass client_id)"
            )

        if client_secret is None and settings.trakt_client_secret is not None:
            client_secret = settings.trakt_client_secret.get_secret_value()
        self._client_secret = client_secret

        self.redirect_uri = redirect_uri or settings.trakt_redirect_uri
        self.api_url = (api_url or settings.trakt_api_url).rstrip("/")
        self.user_agent = user_agent or settings.trakt_user_agent
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.token = token.model_copy() if token is not None else TokenState()
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TraktClient":
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            base_url=self.api_url,
            timeout=self.timeout,
        )
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: object | None,
    ) -> None:
        """Exit async context manager."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get HTTP client, ensuring it's initialized.

        Raises:
            RuntimeError: If client not initialized (not in context manager)
        """
        if self._client is None:
            raise RuntimeError("TraktClient must be used as async context manager")
        return self._client

    @property
    def client_secret(self) -> str:
        """Application secret required by the OAuth endpoints.

        Raises:
            TraktNotConfiguredError: Secret not given or configured
        """
        if not self._client_secret:
            raise TraktNotConfiguredError(
                "Trakt client secret is not configured (set TRAKT_CLIENT_SECRET or pass client_secret)"
            )
        return self._client_secret

    @property
    def site_url(self) -> str:
        """Website URL derived from the API URL (``api.trakt.tv`` -> ``trakt.tv``)."""
        return self.api_url.replace("://api.", "://", 1).replace("://api-", "://", 1)

    def _get_headers(self) -> dict[str, str]:
        """Get Trakt API headers, with bearer token when authenticated."""
        headers = {
            "Content-Type": "application/json",
            "trakt-api-version": API_VERSION,
            "trakt-api-key": self.client_id,
            "User-Agent": self.user_agent,
        }
        if self.token.access_token:
            headers["Authorization"] = f"Bearer {self.token.access_token}"
        return headers

    async def _call(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | BaseModel | None = None,
    ) -> Any:
        """Make an API request.

        Args:
            method: HTTP method (get, post, put, delete)
            path: API path starting with "/"
            params: Query parameters for GET, JSON body otherwise

        Returns:
            Decoded JSON response, or None for an empty body

        Raises:
            TraktAuthError: Missing or invalid OAuth token (401/403)
            TraktNotFoundError: Resource not found (404)
            TraktRateLimitError: Rate limit exceeded (429)
            TraktAPIError: Other non-2xx responses
            TraktConnectionError: Network failure or timeout
        """
        method = method.lower()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        query: dict[str, Any] | None = None
        body: Any = None
        if method == "get":
            query = build_query(params) or None
        elif params:
            body = to_jsonable(params)

        logger.debug("trakt_request", method=method, path=path, params=query)
        return await self._send(method.upper(), path, self._get_headers(), params=query, json=body)

    async def _post_oauth(self, path: str, payload: dict[str, Any]) -> Any:
        """POST to an OAuth endpoint.

        OAuth endpoints take no API key or bearer token, only the payload.
        """
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        logger.debug("trakt_oauth_request", path=path)
        return await self._send("POST", path, headers, json=payload)

    async def _send(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        try:
            response = await self.client.request(
                method,
                path,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.warning("trakt_timeout", method=method, path=path)
            raise TraktConnectionError(f"Request timeout: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("trakt_http_error", method=method, path=path, error=str(e))
            raise TraktConnectionError(f"HTTP error: {e}") from e

        return self._handle_response(response, method, path)

    @staticmethod
    def _handle_response(response: httpx.Response, method: str, path: str) -> Any:
        status = response.status_code
        if 200 <= status < 300:
            if not response.content:
                return None
            return response.json()

        text = response.text[:200] if response.text else ""
        reason = response.reason_phrase or ""
        logger.warning("trakt_api_error", method=method, path=path, status_code=status)

        if status in (401, 403):
            raise TraktAuthError(
                f"Trakt authorization failed ({status}) for {path}",
                status_code=status,
                response_text=text,
                reason=reason,
            )
        if status == 404:
            raise TraktNotFoundError(
                f"Resource not found: {path}",
                status_code=status,
                response_text=text,
                reason=reason,
            )
        if status == 429:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            raise TraktRateLimitError(retry_after, response_text=text)

        raise TraktAPIError(
            f"Trakt API error {status}: {text or reason or 'Unknown error'}",
            status_code=status,
            response_text=text,
            reason=reason,
        )

"""Exceptions raised by the Trakt client."""


class TraktError(Exception):
    """Base exception for Trakt client errors."""

    pass


class TraktNotConfiguredError(TraktError):
    """Client id or secret missing for the requested operation."""

    pass


class TraktConnectionError(TraktError):
    """Raised when the request never produced an HTTP response."""

    pass


class TraktAPIError(TraktError):
    """Trakt answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_text: str = "",
        reason: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text
        self.reason = reason


class TraktAuthError(TraktAPIError):
    """Missing, expired, or insufficient OAuth credentials (401/403)."""

    def __init__(
        self,
        message: str,
        status_code: int = 401,
        response_text: str = "",
        reason: str = "",
    ):
        super().__init__(message, status_code, response_text, reason)


class TraktCSRFError(TraktAuthError):
    """OAuth state returned by the redirect does not match the one issued."""

    def __init__(self, message: str = "Invalid CSRF (State)"):
        super().__init__(message, status_code=400)


class TraktNotFoundError(TraktAPIError):
    """Raised when a resource is not found on Trakt."""

    pass


class TraktRateLimitError(TraktAPIError):
    """Raised when Trakt rate limit is exceeded."""

    def __init__(self, retry_after: int = 1, response_text: str = ""):
        self.retry_after = retry_after
        super().__init__(
            f"Rate limit exceeded. Retry after {retry_after} seconds.",
            status_code=429,
            response_text=response_text,
        )


class TraktDeviceCodeError(TraktError):
    """Device code polling ended without a token."""

    def __init__(self, status: int, message: str):
        super().__init__(f"Device authorization failed ({status}): {message}")
        self.status = status
        self.message = message

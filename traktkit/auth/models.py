"""OAuth2 token and device code models."""

import time
from enum import IntEnum

from pydantic import BaseModel


class DeviceCodeStatus(IntEnum):
    """Statuses returned by ``/oauth/device/token`` while polling."""

    SUCCESS = 200
    PENDING = 400
    NOT_FOUND = 404
    ALREADY_USED = 409
    EXPIRED = 410
    DENIED = 418
    SLOW_DOWN = 429


DEVICE_CODE_MESSAGES: dict[int, str] = {
    DeviceCodeStatus.SUCCESS: "Success",
    DeviceCodeStatus.PENDING: "Pending - waiting for user authorization",
    DeviceCodeStatus.NOT_FOUND: "Not Found - invalid device_code",
    DeviceCodeStatus.ALREADY_USED: "Already Used - user already approved this code",
    DeviceCodeStatus.EXPIRED: "Expired - the tokens have expired, restart the process",
    DeviceCodeStatus.DENIED: "Denied - user explicitly denied this code",
    DeviceCodeStatus.SLOW_DOWN: "Slow Down - polling too quickly",
}


class TokenState(BaseModel):
    """Credentials held by a client.

    ``expires`` is the absolute expiry in epoch milliseconds, the format used
    by exported Trakt sessions. ``state`` is the pending CSRF value issued by
    the authorization URL and is never exported.
    """

    access_token: str | None = None
    refresh_token: str | None = None
    expires: int | None = None
    state: str | None = None

    @property
    def is_expired(self) -> bool:
        """Check if the access token expiry lies in the past."""
        return self.expires is not None and self.expires < int(time.time() * 1000)


class TokenResponse(BaseModel):
    """Response of ``/oauth/token`` and a successful device token poll."""

    access_token: str
    refresh_token: str
    created_at: int
    expires_in: int
    token_type: str = "bearer"
    scope: str = "public"

    @property
    def expires_at_ms(self) -> int:
        """Absolute expiry in epoch milliseconds."""
        return (self.created_at + self.expires_in) * 1000


class DeviceCodeResponse(BaseModel):
    """Codes issued by ``/oauth/device/code``."""

    device_code: str
    user_code: str
    verification_url: str
    expires_in: int
    interval: int

    @property
    def activation_url(self) -> str:
        """Verification URL with the user code pre-filled."""
        return f"{self.verification_url.rstrip('/')}/{self.user_code}"


class CheckCodeResponse(BaseModel):
    """Outcome of a single device token poll."""

    status: int
    message: str
    data: TokenResponse | None = None

    @property
    def is_success(self) -> bool:
        return self.status == DeviceCodeStatus.SUCCESS

    @property
    def is_pending(self) -> bool:
        return self.status == DeviceCodeStatus.PENDING

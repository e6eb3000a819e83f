"""Configuration management using pydantic-settings.

Trakt application credentials and client options are loaded and validated here.
The client secret is a SecretStr to prevent accidental logging.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.trakt.tv"
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Nothing is required at import time; a missing client id is reported when
    a client is constructed.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Trakt application credentials
    trakt_client_id: str | None = Field(
        default=None,
        description="Trakt API application client ID",
    )

    trakt_client_secret: SecretStr | None = Field(
        default=None,
        description="Trakt API application client secret",
    )

    trakt_redirect_uri: str = Field(
        default=OOB_REDIRECT_URI,
        description="OAuth redirect URI registered for the application",
    )

    # HTTP client
    trakt_api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Trakt API base URL",
    )

    trakt_user_agent: str = Field(
        default="traktkit",
        description="User-Agent header sent with every request",
    )

    request_timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
        gt=0,
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    environment: str = Field(
        default="production",
        description="Environment name (development, production)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v_upper

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is development or production."""
        allowed = {"development", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v_lower

    @field_validator("trakt_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def has_credentials(self) -> bool:
        """Check if both Trakt client id and secret are configured."""
        return all(
            [
                self.trakt_client_id,
                self.trakt_client_secret,
            ]
        )

    def get_safe_dict(self) -> dict[str, str | int | float | None]:
        """Get configuration as dict with sensitive values masked.

        Returns:
            Dictionary with SecretStr values shown as '***'
        """
        result = {}
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)

            if isinstance(value, SecretStr):
                result[field_name] = "***"
            elif value is None:
                result[field_name] = None
            else:
                result[field_name] = value

        return result


# Global settings instance
settings = Settings()

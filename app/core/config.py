"""Application configuration."""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GEOCODING_URL = (
    "https://portal.spatial.nsw.gov.au/server/rest/services/"
    "NSW_Geocoded_Addressing_Theme/FeatureServer/1/query"
)
DEFAULT_BOUNDARIES_URL = (
    "https://portal.spatial.nsw.gov.au/server/rest/services/"
    "NSW_Administrative_Boundaries_Theme/FeatureServer/4/query"
)


class AddressServiceConfig(BaseModel):
    """Upstream endpoints and limits handed to the lookup clients."""

    geocoding_url: str = DEFAULT_GEOCODING_URL
    boundaries_url: str = DEFAULT_BOUNDARIES_URL
    request_timeout: float = Field(default=15.0, gt=0)
    user_agent: str = "NSW-Address-Lookup-Service/1.0"

    model_config = {"frozen": True}


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    app_name: str = "NSW Address Lookup"
    version: str = "1.0.0"
    api_prefix: str = ""

    # CORS Settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False

    # Server Settings
    HOST: str = "0.0.0.0"  # nosec B104
    PORT: int = Field(default=3000, gt=0, lt=65536)

    # Upstream Settings
    GEOCODING_URL: str = DEFAULT_GEOCODING_URL
    BOUNDARIES_URL: str = DEFAULT_BOUNDARIES_URL
    REQUEST_TIMEOUT: float = Field(default=15.0, gt=0)  # seconds
    USER_AGENT: str = "NSW-Address-Lookup-Service/1.0"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",  # Allow extra fields in environment
    )

    @field_validator("GEOCODING_URL", "BOUNDARIES_URL")
    @classmethod
    def validate_upstream_url(cls, value: str) -> str:
        """Upstream endpoints must be plain http(s) URLs."""
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Upstream URL must use http or https: {value!r}")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise the log level name."""
        level = value.lower()
        if level not in {"debug", "info", "warning", "error", "critical"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level.upper()

    def address_service_config(self) -> AddressServiceConfig:
        """Build the client configuration from these settings."""
        return AddressServiceConfig(
            geocoding_url=self.GEOCODING_URL,
            boundaries_url=self.BOUNDARIES_URL,
            request_timeout=self.REQUEST_TIMEOUT,
            user_agent=self.USER_AGENT,
        )


# Create settings instance
settings = Settings()

"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CredentialSchemeName = Literal["pin", "api_key", "session"]


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # Shared PINs, comma-separated (e.g. AUTH__VALID_PINS="demo1,demo2")
    # Every holder of a valid PIN acts as the same shared identity
    valid_pins: str = ""

    # Credential schemes accepted by the gateway
    enabled_schemes: list[CredentialSchemeName] = ["pin", "api_key", "session"]

    # Session token settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 30

    @property
    def pin_allowlist(self) -> tuple[str, ...]:
        """Configured PINs, trimmed, with empty entries dropped."""
        return tuple(pin.strip() for pin in self.valid_pins.split(",") if pin.strip())


class LinkSettings(BaseModel):
    """Advertiser account linking configuration."""

    # Maximum number of distinct ads accounts an identity may link
    # Applies to new registrations and to the shared PIN identity
    default_limit: int = Field(default=10, gt=0)


class UpstreamSettings(BaseModel):
    """External payment API configuration."""

    base_url: str = "https://ads.tiktok.com"

    # Passed to the HTTP client; no retries are made on timeout
    timeout_seconds: float = 30.0


class APISettings(BaseModel):
    """Where the gateway listens and who may call it."""

    host: str
    port: int
    protocol: Literal["http", "https"]

    # The browser extension calls from arbitrary page origins
    allowed_origins: list[str] = ["*"]

    @computed_field
    @property
    def base_url(self) -> str:
        """Public URL of the gateway; the port is only shown for localhost."""
        if self.host != "localhost":
            return f"{self.protocol}://{self.host}"
        return f"{self.protocol}://{self.host}:{self.port}"


class ObservabilitySettings(BaseModel):
    """Logfire export settings."""

    # OBSERVABILITY__LOGFIRE_TOKEN; console-only output when unset
    logfire_token: str | None = None

    # None means "send whenever a token is configured"
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Gateway settings, read from the environment and ``.env``.

    Nested sections use ``__`` as the delimiter, e.g.::

        AUTH__VALID_PINS=demo1,demo2
        AUTH__JWT_SECRET=...
        LINKS__DEFAULT_LIMIT=10
        UPSTREAM__BASE_URL=https://ads.tiktok.com
        ENVIRONMENT=production
        HOST=gateway.example.com
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    version: str = "0.1.0"
    # Written into the image at build time
    version_file: Path = Path("/app/version.txt")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 3000

    auth: AuthSettings = AuthSettings()
    links: LinkSettings = LinkSettings()
    upstream: UpstreamSettings = UpstreamSettings()
    api: APISettings = APISettings(host="localhost", port=3000, protocol="http")
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def derive_api_settings(self) -> "Settings":
        """Fill ``api`` from host, port and environment, and read the build SHA."""
        local = self.environment in ("test", "development")
        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol="http" if local else "https",
            allowed_origins=self.api.allowed_origins,
        )
        if self.git_sha == "unknown":
            self.git_sha = _read_git_sha(self.version_file)
        return self


def _read_git_sha(path: Path) -> str:
    try:
        return path.read_text().strip() or "unknown"
    except OSError:
        return "unknown"

"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Firebase credentials are optional at load time: when
neither key nor path is set the app still starts and reports not-ready.
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "user-provisioning"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS (mobile clients call the callable endpoint directly)
    allowed_origins: str = "*"

    # Firebase: use key (env) or path (file). Project ID defaults to the key's project_id.
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    firebase_project_id: str | None = None

    # REST endpoints; override to point at the local emulators
    identity_toolkit_base_url: str = "https://identitytoolkit.googleapis.com/v1"
    firestore_base_url: str = "https://firestore.googleapis.com/v1"
    http_timeout_seconds: float = 30.0

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("identity_toolkit_base_url", "firestore_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Base URLs are joined with '/<path>'; drop a trailing slash."""
        return v.rstrip("/")

    @field_validator("telemetry_sample_rate")
    @classmethod
    def validate_sample_rate(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("telemetry_sample_rate must be between 0.0 and 1.0")
        return v

    @property
    def firebase_configured(self) -> bool:
        """True when a service account key or key file path is set."""
        has_key = (
            self.firebase_service_account_key is not None
            and bool(self.firebase_service_account_key.get_secret_value())
        )
        return has_key or bool(self.firebase_service_account_path)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()

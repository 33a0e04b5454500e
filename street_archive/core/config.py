"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend connection settings are validated at load time.
"""

from functools import lru_cache
from urllib.parse import urlparse

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every setting has a default that works against a local single-node
    Elasticsearch; validate_search_backend rejects unusable combinations.
    """

    # App
    app_name: str = "street-archive"
    app_version: str = "1.0.0"
    debug: bool = False

    # Elasticsearch
    elasticsearch_url: str = "http://localhost:9200"
    elasticsearch_index: str = "street-names"
    elasticsearch_api_key: SecretStr | None = None
    elasticsearch_username: str | None = None
    elasticsearch_password: SecretStr | None = None
    elasticsearch_request_timeout: float = 10.0  # seconds, per backend call
    elasticsearch_verify_certs: bool = True
    elasticsearch_ca_certs: str | None = None

    # CORS (the search UI runs on the Vite dev server by default)
    allowed_origins: str = "http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"
    rate_limit_enabled: bool = True

    # OpenTelemetry
    telemetry_enabled: bool = True
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

    @model_validator(mode="after")
    def validate_search_backend(self) -> "Settings":
        """Validate Elasticsearch URL, index name and credentials.

        - URL must be http(s) with a host.
        - Index name must be non-empty and lowercase (Elasticsearch rule).
        - Basic auth needs both username and password.
        """
        parsed = urlparse(self.elasticsearch_url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(
                f"ELASTICSEARCH_URL must be an http(s) URL, got: {self.elasticsearch_url!r}"
            )
        index = self.elasticsearch_index.strip()
        if not index:
            raise ValueError("ELASTICSEARCH_INDEX must not be empty")
        if index != index.lower():
            raise ValueError(
                f"ELASTICSEARCH_INDEX must be lowercase, got: {self.elasticsearch_index!r}"
            )
        if self.elasticsearch_username and not (
            self.elasticsearch_password
            and self.elasticsearch_password.get_secret_value()
        ):
            raise ValueError(
                "ELASTICSEARCH_PASSWORD is required when ELASTICSEARCH_USERNAME is set."
            )
        if self.elasticsearch_request_timeout <= 0:
            raise ValueError("ELASTICSEARCH_REQUEST_TIMEOUT must be positive")
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins parsed from the comma-separated setting."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()

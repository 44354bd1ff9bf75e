"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend credentials and the signing secret are
validated at load time.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Used only outside production when SECRET_KEY is unset.
DEV_SECRET_KEY = "lawdesk-dev-secret-change-me"


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_backend_and_secret (Firestore credentials when the firestore
    backend is selected, SECRET_KEY in production).
    """

    # App
    app_name: str = "lawdesk"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Document store: "firestore" (REST API) or "memory" (in-process, dev/tests)
    database_backend: str = "firestore"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_days: int = 7
    bcrypt_rounds: int = 12
    temp_password_length: int = 8

    # CORS
    allowed_origins: str = (
        "http://localhost:5173,http://127.0.0.1:5173,https://localhost:5173"
    )

    # Request / middleware
    max_request_size: int = 10 * 1024 * 1024  # 10MB
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # Rate limiting (slowapi)
    rate_limit_enabled: bool = True

    # OpenTelemetry
    telemetry_enabled: bool = True
    telemetry_exporter: Literal["console", "otlp", "none"] = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backend_and_secret(self) -> "Settings":
        """Validate document store backend and the JWT signing secret.

        - Firestore: FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH required.
        - Memory: no credentials; data lives only as long as the process.
        - SECRET_KEY: required in production; elsewhere falls back to a dev key.
        """
        if self.database_backend == "firestore":
            has_key = (
                self.firebase_service_account_key
                and self.firebase_service_account_key.get_secret_value()
            )
            if not has_key and not self.firebase_service_account_path:
                raise ValueError(
                    "When database_backend is 'firestore', set FIREBASE_SERVICE_ACCOUNT_KEY (full JSON string) "
                    "or FIREBASE_SERVICE_ACCOUNT_PATH (path to JSON file)."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'firestore' or 'memory', got: {self.database_backend!r}"
            )
        if not self.secret_key.get_secret_value():
            if self.is_production:
                raise ValueError(
                    "SECRET_KEY is required in production. Generate with: openssl rand -hex 32."
                )
            logger.warning(
                "SECRET_KEY is not set; using the development signing key. "
                "Tokens issued now are forgeable by anyone with the source."
            )
            self.secret_key = SecretStr(DEV_SECRET_KEY)
        if self.bcrypt_rounds < 4 or self.bcrypt_rounds > 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        if self.temp_password_length < 8:
            raise ValueError("temp_password_length must be at least 8")
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError("TELEMETRY_OTLP_ENDPOINT is required when TELEMETRY_EXPORTER is otlp")
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("telemetry_sample_rate must be between 0.0 and 1.0")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

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

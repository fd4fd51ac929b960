"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults work out-of-the-box for local development

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - https_redirect off by default: TLS is usually terminated by the proxy in front
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    service_name: str = "parity-api"
    version: str = "1.0.0"
    environment: str = "development"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    https_redirect: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()

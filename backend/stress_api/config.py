"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - PORT and HOST come from the environment (PORT defaults to 3000)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the server starts with no configuration
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Service descriptor (GET /)
    service_name: str = "Stress Test API"
    service_version: str = "1.0.0"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Anything other than json falls back to the human-readable format."""
        v = v.strip().lower()
        return v if v == "json" else "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()

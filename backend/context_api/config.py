"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - api_prefix is "" or starts with "/" and has no trailing "/"

Design Decisions:
    - Defaults provided for every setting: runs locally against a backend on :8081
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Item service (recommendation backend)
    item_service_url: str = "http://localhost:8081"
    item_service_timeout_seconds: float = 5.0

    # API
    api_prefix: str = ""
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("api_prefix", mode="before")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        if not isinstance(v, str):
            return v
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

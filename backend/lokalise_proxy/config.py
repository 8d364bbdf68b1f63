"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - LOKALISE_API_TOKEN / LOKALISE_PROJECT_ID are development fallbacks only;
      per-request values always take precedence

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - ALLOWED_ORIGINS stays a comma-separated string in the environment (NoDecode)
      so existing deployments keep their configuration
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from lokalise_proxy.core.domain_types import FetchFailurePolicy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True,
    )

    # Lokalise
    lokalise_base_url: str = "https://api.lokalise.com/api2"
    lokalise_timeout_seconds: float = 30.0
    lokalise_api_token: str | None = None
    lokalise_project_id: str | None = None

    # Translation aggregation
    translation_fetch_policy: FetchFailurePolicy = FetchFailurePolicy.DEGRADE
    key_page_size: int = Field(500, ge=1, le=500)
    key_page_limit: int = Field(100, ge=1)

    # Rate limiting (per client IP, fixed window)
    rate_limit_enabled: bool = True
    rate_limit_max_requests: int = Field(100, ge=1)
    rate_limit_window_seconds: int = Field(900, ge=1)

    # API
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=[
            "http://localhost:1234",
            "https://builder.io",
            "https://app.builder.io",
        ],
        validation_alias="allowed_origins",
    )
    environment: str = "development"
    debug: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        """ALLOWED_ORIGINS=https://a.example,https://b.example"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()

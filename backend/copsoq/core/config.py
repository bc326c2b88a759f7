"""Configuration settings using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    environment: Literal["development", "production"] = "development"
    api_docs_enabled: bool | None = None
    log_level: str = "INFO"

    # CORS
    cors_allow_origins: list[str] = ["http://localhost:3000"]
    cors_allow_methods: list[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list[str] = [
        "Accept",
        "Content-Type",
        "X-Request-ID",
        "X-Assessment-ID",
        "X-Metrics-Token",
    ]

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _parse_csv_lists(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    # Scoring engine
    # JSON file replacing the default cascade condition table
    condition_rules_path: str | None = None
    # Answers needed to finalize; None means the full catalog length
    required_answer_count: int | None = None

    # Metrics endpoint protection (production only)
    metrics_token: str | None = None

    @field_validator("required_answer_count")
    @classmethod
    def _positive_required_count(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("REQUIRED_ANSWER_COUNT must be positive")
        return v

    @model_validator(mode="after")
    def _validate_production_settings(self) -> Settings:
        if self.environment != "production":
            return self

        for name in ("cors_allow_origins", "cors_allow_methods", "cors_allow_headers"):
            if "*" in getattr(self, name):
                raise ValueError(f"{name.upper()} cannot contain '*' in production")

        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

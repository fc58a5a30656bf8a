"""Application configuration using Pydantic settings."""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the siting service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    supabase_url: Optional[str] = Field(default=None, validation_alias="SUPABASE_URL")
    supabase_key: Optional[str] = Field(default=None, validation_alias="SUPABASE_ANON_KEY")
    supabase_timeout_seconds: float = Field(default=10.0, gt=0)

    renewable_radius_km: float = Field(default=100.0, gt=0)
    demand_radius_km: float = Field(default=150.0, gt=0)
    max_signals: int = Field(default=5, ge=1)

    jitter_enabled: bool = True
    jitter_seed: Optional[int] = None

    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()

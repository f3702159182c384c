"""Recommendation engine configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    environment: str = "development"

    log_level: str = "INFO"
    log_format: str = "json"  # json | console

    min_interactions: int = 3  # History length before personalization kicks in
    recency_decay: float = 0.95
    default_limit: int = 20
    max_limit: int = 100
    cold_start_seed: Optional[int] = None


@lru_cache()
def get_settings() -> Settings:
    return Settings()

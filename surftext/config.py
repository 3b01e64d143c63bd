"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "info"

    # Encoding defaults
    default_strategy: str = "uniform"
    default_zones: int = 20
    out_of_domain: str = "clamp"  # clamp | raise

    # N-gram graph
    ngram_min_rank: int = 3
    ngram_max_rank: int = 3
    ngram_window: int = 3

    text_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_prefix="SURFTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

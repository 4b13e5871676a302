"""Library configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from STEAM_MACHINE_ID_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STEAM_MACHINE_ID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    random_seed: int | None = Field(
        default=None,
        description="Seed for the process-wide random source (tests only)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

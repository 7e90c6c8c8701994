from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment."""

    app_name: str = "Inventory API"
    debug: bool = False
    database_url: str = "sqlite+aiosqlite:///./inventory.db"
    check_limit: int = Field(default=1, ge=1)
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Ensure settings are constructed once per process."""

    return Settings()

"""Client configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from police_api import __version__


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # data.police.uk API
    police_api_base_url: str = "https://data.police.uk/api"
    police_api_timeout: float = 30.0
    police_api_user_agent: str = f"police-api-python/{__version__}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

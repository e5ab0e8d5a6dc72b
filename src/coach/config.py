"""Application settings loaded from the environment."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="COACH_", env_file=".env")

    data_dir: Path = Path.home() / ".coach"
    log_level: str = "WARNING"

    # Strava OAuth app (optional; needed to refresh access tokens)
    strava_client_id: str | None = None
    strava_client_secret: str | None = None
    strava_api_base: str = "https://www.strava.com/api/v3"
    strava_token_url: str = "https://www.strava.com/oauth/token"

    hevy_api_base: str = "https://api.hevyapp.com/v1"

    http_timeout: float = 30.0

    # Allow empty env strings for optional fields
    @field_validator("strava_client_id", "strava_client_secret", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if v in ("", None, "null", "None"):
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()

"""Application settings loaded from environment / .env file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration.

    API keys are read from ``GOOGLE_MAPS_API_KEY`` and
    ``OPENROUTESERVICE_API_KEY``; every other field maps to the upper-cased
    field name as well.
    """

    app_name: str = "farthest-reach"
    app_env: str = "development"
    debug: bool = False

    # Default origin when none is given (Tokyo Station)
    lat: float = Field(default=35.681236, ge=-90, le=90)
    lng: float = Field(default=139.767125, ge=-180, le=180)
    timezone: str = "Asia/Tokyo"

    api_port: int = 8000
    data_dir: str = "data"

    # Oracle
    oracle: str = "google"
    google_maps_api_key: str | None = None
    openrouteservice_api_key: str | None = None
    http_timeout: float = 30.0

    # Search
    bearing_count: int = Field(default=8, ge=1)
    max_concurrency: int = Field(default=4, ge=1)
    expansion_rounds: int = Field(default=3, ge=0)
    bisection_rounds: int = Field(default=7, ge=0)

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached after first load)."""
    return Settings()

# stockcount/core/config.py
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Global application settings, read from STOCKCOUNT_* env vars or a .env file.
    """

    # runtime environment
    ENV: str = Field(default="dev")
    DEBUG: bool = Field(default=False)

    # logging
    LOG_LEVEL: str = Field(default="INFO")

    # store
    SEED_ON_STARTUP: bool = Field(default=True, description="seed the in-progress stock counts")

    # observability
    METRICS_ENABLED: bool = Field(default=True)

    # http
    CORS_ORIGINS: List[str] = Field(
        default=[
            "http://127.0.0.1:5173",
            "http://localhost:5173",
            "http://127.0.0.1:8000",
            "http://localhost:8000",
        ]
    )
    HOST: str = Field(default="127.0.0.1")
    PORT: int = Field(default=8000)

    model_config = SettingsConfigDict(env_prefix="STOCKCOUNT_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> AppSettings:
    """Process-wide settings singleton."""
    return AppSettings()

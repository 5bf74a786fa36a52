"""
Runtime settings, read from ``RENTAL_*`` environment variables or a .env file.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="RENTAL_", env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "Vehicle Rental Backend"
    app_version: str = "1.0.0"

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    cors_origins: List[str] = ["*"]
    cors_max_age: int = 3600

    seed_demo_data: bool = True
    vehicles_file: Optional[Path] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

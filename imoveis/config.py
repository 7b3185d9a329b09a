"""
Imoveis settings

All settings can be overridden from the environment or a .env file.
Usage:
    from imoveis.config import settings
    size = settings.DEFAULT_PAGE_SIZE
"""

import sys
from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unrelated .env entries
    )

    # === Environment ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === Listing store ===
    SEED_DATA_PATH: Path = _PACKAGE_DIR / "data_sources" / "seed_listings.json"

    # === Result truncation ===
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100
    FEATURED_LIMIT: int = 10
    RECENT_LIMIT: int = 5

    # === API ===
    CORS_ORIGINS: list[str] = ["*"]


def setup_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper())


# Singleton instance
settings = Settings()

"""Configuration and environment settings"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration, read from FORMULIZER_* variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="FORMULIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Platform connection
    INSTANCE_URL: Optional[str] = None
    ACCESS_TOKEN: Optional[str] = None

    # Apex REST endpoints, relative to the instance URL
    EVALUATE_PATH: str = "/services/apexrest/formulizer/evaluate"
    OBJECTS_PATH: str = "/services/apexrest/formulizer/objects"

    REQUEST_TIMEOUT: float = 30.0  # seconds

    # UI
    COPY_REVERT_SECONDS: float = 2.0
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 7860

    LOG_LEVEL: str = "INFO"


def get_settings() -> Settings:
    """Read settings fresh from the environment."""
    return Settings()


def get_logging_level(level_str: Optional[str]) -> int:
    """Map string logging level to logging constant."""
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    return level_map.get((level_str or '').upper(), logging.INFO)


def setup_logging(level_str: Optional[str] = None) -> None:
    logging.basicConfig(
        level=get_logging_level(level_str),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


settings = get_settings()

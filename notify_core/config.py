"""
Configuration and logging setup for the product notification manager.

Settings are read from environment variables prefixed with ``NOTIFY_``
(for example ``NOTIFY_LOG_LEVEL=DEBUG``) or from a local ``.env`` file.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).parent / "data"

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Product Notification Manager"
    environment: str = "dev"

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_reload: bool = False

    # CORS origins (comma-separated)
    cors_origins: str = "*"

    log_level: str = "INFO"

    # Sample data
    seed_sample_data: bool = True
    data_dir: Path = DEFAULT_DATA_DIR

    model_config = SettingsConfigDict(
        env_prefix="NOTIFY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

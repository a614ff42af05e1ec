"""
Configuration management using Pydantic Settings.

Environment variables (prefix HIERARCHY_FILTER_):
- HIERARCHY_FILTER_DATABASE_URL: SQLAlchemy database URL for the catalog
- HIERARCHY_FILTER_PRODUCT_LEVELS: JSON list of level names to materialize
- HIERARCHY_FILTER_SEARCH_DEBOUNCE_SECONDS: Idle time before a search rebuild
- HIERARCHY_FILTER_LOG_LEVEL: Logging level applied by configure_logging()
"""
import logging
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import DEFAULT_PRODUCT_LEVELS, DEFAULT_SEARCH_PARAMS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HIERARCHY_FILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database Configuration
    database_url: str = Field(default="sqlite:///catalog.db")

    # Hierarchy
    product_levels: List[str] = Field(default_factory=lambda: list(DEFAULT_PRODUCT_LEVELS))

    # Search
    search_debounce_seconds: float = Field(
        default=DEFAULT_SEARCH_PARAMS['debounce_seconds'],
        ge=0.0
    )

    # Logging
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    def get_level_set(self):
        """Get the configured levels as a LevelSet."""
        from hierarchy.levels import LevelSet
        return LevelSet.from_names(self.product_levels)

    def get_session_config(self) -> dict:
        """Get filter session configuration as dictionary."""
        return {
            'levels': self.get_level_set(),
            'debounce_seconds': self.search_debounce_seconds,
        }


def configure_logging(level: str = None) -> None:
    """
    Apply the configured log level to the package loggers.

    Args:
        level: Override for settings.log_level
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=level_name,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    for name in ('hierarchy', 'data', 'serving', 'config'):
        logging.getLogger(name).setLevel(level_name)


# Global settings instance
settings = Settings()

"""Application configuration."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Editor settings loaded from environment variables (SHAPEDRAWER_*) and .env.

    Priority: environment variables > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="SHAPEDRAWER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Hit testing
    hit_tolerance: float = 8.0  # max distance (px) from the curve that still counts as a tap on it
    anchor_hit_radius: float | None = None  # grab radius around markers; None uses half the marker size
    curve_samples: int = 32  # samples per cubic segment when flattening for hit tests

    # Frame editors
    frame_edge_size: float = 44.0  # width of the grab band along rectangle/oval borders

    # Demo window
    window_width: int = 800
    window_height: int = 600

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    logger.debug("Loaded settings: %s", settings.model_dump())
    return settings

"""Configuration."""

from .settings import Settings, CURRENT_PATH, SERIES_PATH, WEIGHT_STEP

__all__ = ["Settings", "CURRENT_PATH", "SERIES_PATH", "WEIGHT_STEP"]

"""Configuration settings for the weight tracker."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv


load_dotenv()


# Backend endpoints (relative to the configured origin)
CURRENT_PATH = "/api/current"
SERIES_PATH = "/api/series"

# Step applied by the increase/decrease buttons
WEIGHT_STEP = 0.1


@dataclass
class Settings:
    """Application settings."""

    base_url: str = field(
        default_factory=lambda: os.getenv("WEIGHT_TRACKER_URL", "http://localhost:8989")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("WEIGHT_TRACKER_TIMEOUT", "30.0"))
    )
    export_dir: Path = field(
        default_factory=lambda: Path(os.getenv("WEIGHT_TRACKER_EXPORT_DIR", "dist"))
    )

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    def validate(self) -> None:
        """Validate required settings."""
        if not self.base_url:
            raise ValueError("WEIGHT_TRACKER_URL not set")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"WEIGHT_TRACKER_URL must start with http:// or https://, got {self.base_url!r}"
            )
        if self.request_timeout <= 0:
            raise ValueError("WEIGHT_TRACKER_TIMEOUT must be positive")

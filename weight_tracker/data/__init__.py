"""Backend access."""

from .api_client import WeightApiClient

__all__ = ["WeightApiClient"]

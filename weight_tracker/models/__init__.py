"""Wire models."""

from .weight_data import CurrentPoint, Series, RawAndAveragedSeries

__all__ = ["CurrentPoint", "Series", "RawAndAveragedSeries"]

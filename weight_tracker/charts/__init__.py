"""Series charting."""

from weight_tracker.charts.series_chart import build_series_figure, SeriesChartRenderer

__all__ = ["build_series_figure", "SeriesChartRenderer"]

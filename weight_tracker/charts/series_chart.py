"""Plotly chart of the raw weight series and its backend average."""

import logging

import httpx
import plotly.graph_objects as go

from weight_tracker.data.api_client import WeightApiClient
from weight_tracker.models import RawAndAveragedSeries


logger = logging.getLogger(__name__)


RANGE_BUTTONS = [
    dict(count=1, label="1m", step="month", stepmode="backward"),
    dict(count=6, label="6m", step="month", stepmode="backward"),
    dict(step="all"),
]


def build_series_figure(series: RawAndAveragedSeries) -> go.Figure:
    """Raw points as markers, the average as a line, on a date axis."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=series.raw.dates, y=series.raw.weights,
        mode="markers",
        name="Raw data",
    ))

    fig.add_trace(go.Scatter(
        x=series.average.dates, y=series.average.weights,
        mode="lines",
        name="Average",
    ))

    fig.update_layout(
        xaxis=dict(
            type="date",
            rangeselector=dict(buttons=RANGE_BUTTONS),
        ),
        legend=dict(x=1, xanchor="right", y=1),
    )

    return fig


class SeriesChartRenderer:
    """Fetches the series once and builds its figure."""

    def __init__(self, client: WeightApiClient) -> None:
        self.client = client
        self.figure: go.Figure | None = None
        self.last_error: str | None = None
        self._loaded = False

    def load(self) -> go.Figure | None:
        """
        Fetch and build the chart, at most once per renderer.

        Returns:
            The figure, or None if the fetch failed
        """
        if self._loaded:
            return self.figure
        self._loaded = True

        try:
            series = self.client.get_series()
        except httpx.HTTPStatusError as e:
            self.last_error = f"HTTP {e.response.status_code} loading series"
            logger.error(self.last_error)
            return None
        except (httpx.HTTPError, ValueError) as e:
            self.last_error = f"Could not load series: {e}"
            logger.error(self.last_error)
            return None

        self.figure = build_series_figure(series)
        return self.figure

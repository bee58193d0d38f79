"""Export the weight chart as self-contained HTML."""

import html
import logging
from datetime import datetime
from pathlib import Path

import httpx

from weight_tracker.charts import build_series_figure
from weight_tracker.config import Settings
from weight_tracker.data.api_client import WeightApiClient


logger = logging.getLogger(__name__)


def render_page(figure_html: str, current: float | None) -> str:
    """Wrap a chart fragment in a standalone page."""
    current_str = f"{current:.1f}" if current is not None else "N/A"
    generated = datetime.now().strftime("%Y-%m-%d %H:%M")

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Weight</title>
    <style>
        body {{ background: #0f172a; color: #e2e8f0; font-family: 'Inter', sans-serif; margin: 2rem; }}
        .current {{ font-size: 3rem; font-weight: 700; color: #3b82f6; font-family: 'SF Mono', 'Consolas', monospace; }}
        .meta {{ color: #64748b; font-size: 0.75rem; }}
    </style>
</head>
<body>
    <div class="meta">Current weight</div>
    <div class="current">{html.escape(current_str)}</div>
    {figure_html}
    <div class="meta">Generated {generated}</div>
</body>
</html>'''


def export_html(
    output_path: Path | str | None = None,
    settings: Settings | None = None,
    client: WeightApiClient | None = None,
) -> Path:
    """
    Fetch the series and write it as a standalone HTML chart.

    Args:
        output_path: Where to save the HTML file. Defaults to <export_dir>/index.html
        settings: Settings to use; defaults from the environment
        client: Existing API client; one is created (and closed) if omitted

    Returns:
        Path to the generated file
    """
    settings = settings or Settings()
    owns_client = client is None
    client = client or WeightApiClient(settings)

    try:
        series = client.get_series()
        try:
            current = client.get_current()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Exporting without current weight: {e}")
            current = None
    finally:
        if owns_client:
            client.close()

    fig = build_series_figure(series)
    page = render_page(fig.to_html(full_html=False, include_plotlyjs="cdn"), current)

    # Determine output path
    if output_path is None:
        output_path = settings.export_dir / "index.html"
    else:
        output_path = Path(output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")
    logger.info(f"Wrote {len(series.raw)} points to {output_path}")

    return output_path


def main() -> None:
    """CLI entry point."""
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Export weight chart as HTML")
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output path (default: dist/index.html)"
    )
    args = parser.parse_args()

    try:
        path = export_html(args.output)
        print(f"Chart exported to: {path}")
        print(f"File size: {path.stat().st_size / 1024:.1f} KB")
    except ValueError as e:
        print(f"Error: {e}")
        raise SystemExit(1)
    except httpx.HTTPError as e:
        print(f"API error: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()

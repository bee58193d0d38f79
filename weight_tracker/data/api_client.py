"""HTTP client for the weight tracking backend."""

import logging

import httpx

from weight_tracker.config import Settings, CURRENT_PATH, SERIES_PATH
from weight_tracker.models import CurrentPoint, RawAndAveragedSeries


logger = logging.getLogger(__name__)


class WeightApiClient:
    """Reads and writes the current weight and fetches the series."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.settings.base_url,
                timeout=self.settings.request_timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "WeightApiClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _get_json(self, path: str) -> object:
        response = self.client.get(path)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            raise ValueError(f"{path} returned a non-JSON body") from e

    def get_current(self) -> float:
        """Fetch the latest measurement, as returned by the backend."""
        data = self._get_json(CURRENT_PATH)
        return CurrentPoint.from_json(data).point

    def post_current(self, point: float) -> httpx.Response:
        """
        Persist a new current value.

        Returns:
            The raw response; callers only log it
        """
        response = self.client.post(CURRENT_PATH, json=CurrentPoint(point).to_json())
        response.raise_for_status()
        return response

    def get_series(self) -> RawAndAveragedSeries:
        """Fetch the raw series and the backend-averaged series."""
        data = self._get_json(SERIES_PATH)
        series = RawAndAveragedSeries.from_json(data)
        logger.info(f"Fetched {len(series.raw)} raw and {len(series.average)} averaged points")
        return series


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for reading and writing the current weight."""
    import argparse
    import sys

    from weight_tracker.state import CurrentValueController

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Read or update the tracked weight")
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--status",
        action="store_true",
        help="Show current value and series summary (default)",
    )
    action.add_argument(
        "--set",
        type=str,
        metavar="VALUE",
        help="Store VALUE as the current weight",
    )
    action.add_argument(
        "--increase",
        action="store_true",
        help="Add 0.1 to the current weight",
    )
    action.add_argument(
        "--decrease",
        action="store_true",
        help="Subtract 0.1 from the current weight",
    )
    args = parser.parse_args(argv)
    show_status = args.status or not (args.set is not None or args.increase or args.decrease)

    try:
        with WeightApiClient() as client:
            if not show_status:
                with CurrentValueController(client) as controller:
                    if args.set is not None:
                        future = controller.edit(args.set)
                    else:
                        controller.initialize()
                        if controller.cell.value is None:
                            print(f"Could not read current value: {controller.last_error}")
                            sys.exit(1)
                        future = controller.increase() if args.increase else controller.decrease()

                    if future is None:
                        print(f"Nothing written: {controller.last_error}")
                        sys.exit(1)
                    future.result()
                    print(f"Current weight: {controller.cell.value}")
                return

            print(f"\nCurrent weight: {client.get_current()}")
            series = client.get_series()
            print("-" * 50)
            for name, part in (("raw", series.raw), ("average", series.average)):
                df = part.to_frame()
                if df.empty:
                    print(f"{name:8} | no data")
                    continue
                first = df.index.min().strftime("%Y-%m-%d")
                last = df.index.max().strftime("%Y-%m-%d")
                print(
                    f"{name:8} | {len(df):5} pts | {first} .. {last} | "
                    f"min {df['weight'].min():.1f} max {df['weight'].max():.1f} "
                    f"last {df['weight'].iloc[-1]:.1f}"
                )

    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"Connection error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

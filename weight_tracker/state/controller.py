"""Current-value controller: load, step, edit and persist one weight."""

import logging
import math
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from typing import Any

import httpx

from weight_tracker.config import WEIGHT_STEP
from weight_tracker.data.api_client import WeightApiClient
from weight_tracker.state.value_cell import ValueCell, round_to_tenth


logger = logging.getLogger(__name__)


class CurrentValueController:
    """Owns the current-value cell and every write of it to the backend.

    Writes are fire-and-forget: each one is a separate background task whose
    outcome is only logged. Nothing is retried, debounced or rolled back.
    """

    def __init__(
        self,
        client: WeightApiClient,
        cell: ValueCell | None = None,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.client = client
        self.cell = cell or ValueCell()
        self.last_error: str | None = None
        self._executor = executor
        self._owns_executor = executor is None

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Lazy-initialize the write pool."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=4, thread_name_prefix="weight-sync"
            )
        return self._executor

    def close(self) -> None:
        """Wait for in-flight writes and stop the pool."""
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "CurrentValueController":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def initialize(self) -> bool:
        """
        Load the current value from the backend into the cell.

        On any failure the cell is left untouched and the error is logged.

        Returns:
            True if the cell was loaded
        """
        try:
            point = self.client.get_current()
        except httpx.HTTPStatusError as e:
            self.last_error = f"HTTP {e.response.status_code} loading current weight"
            logger.error(self.last_error)
            return False
        except (httpx.HTTPError, ValueError) as e:
            self.last_error = f"Could not load current weight: {e}"
            logger.error(self.last_error)
            return False

        self.last_error = None
        self.cell.set(point)
        logger.info(f"Loaded current weight {point}")
        return True

    def increase(self) -> Future | None:
        return self._step(WEIGHT_STEP)

    def decrease(self) -> Future | None:
        return self._step(-WEIGHT_STEP)

    def _step(self, delta: float) -> Future | None:
        try:
            current = float(self.cell.value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring step on non-numeric value {self.cell.value!r}")
            return None

        self.cell.set(round_to_tenth(current + delta))
        return self.sync()

    def edit(self, raw: Any) -> Future | None:
        """Store a directly edited value (number or text) and persist it."""
        self.cell.set(raw)
        return self.sync()

    def sync(self) -> Future | None:
        """
        Coerce the cell to a float and post it in the background.

        Returns:
            Future of the write, or None when the cell holds no usable number
        """
        raw = self.cell.value
        try:
            point = float(raw)
        except (TypeError, ValueError):
            point = math.nan
        if not math.isfinite(point):
            self.last_error = f"Not a number: {raw!r}"
            logger.warning(f"Skipping sync, {self.last_error}")
            return None

        self.cell.set(point)
        future = self.executor.submit(self.client.post_current, point)
        future.add_done_callback(partial(_log_sync_result, point))
        return future


def _log_sync_result(point: float, future: Future) -> None:
    error = future.exception()
    if error is None:
        logger.info(f"Synced weight {point} ({future.result().status_code})")
    elif isinstance(error, httpx.HTTPStatusError):
        logger.error(f"Sync of {point} rejected: HTTP {error.response.status_code}")
    else:
        logger.error(f"Sync of {point} failed: {error}")

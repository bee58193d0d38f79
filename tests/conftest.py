"""Shared fixtures: an in-memory fake of the weight backend."""

from __future__ import annotations

import json

import httpx
import pytest

from weight_tracker.config import Settings
from weight_tracker.data.api_client import WeightApiClient


SAMPLE_SERIES = {
    "raw": {"dates": ["2023-01-01", "2023-01-02"], "weights": [80.0, 80.2]},
    "average": {"dates": ["2023-01-01", "2023-01-02"], "weights": [80.0, 80.1]},
}


class FakeBackend:
    """Answers /api/current and /api/series, records every POST body."""

    def __init__(self, current: object = None, series: object = None) -> None:
        self.current = {"point": 82.3} if current is None else current
        self.series = SAMPLE_SERIES if series is None else series
        self.posts: list[dict] = []
        self.fail_status: dict[str, int] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path in self.fail_status:
            return httpx.Response(self.fail_status[path])

        if path == "/api/current" and request.method == "GET":
            return httpx.Response(200, json=self.current)
        if path == "/api/current" and request.method == "POST":
            assert request.headers["content-type"] == "application/json"
            body = json.loads(request.content)
            self.posts.append(body)
            self.current = body
            return httpx.Response(200)
        if path == "/api/series" and request.method == "GET":
            return httpx.Response(200, json=self.series)
        return httpx.Response(404)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(base_url="http://weights.test", request_timeout=5.0, export_dir=tmp_path)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(settings, backend):
    api = WeightApiClient(settings, transport=httpx.MockTransport(backend.handler))
    yield api
    api.close()

"""Tests for the current-value controller."""

from __future__ import annotations

import httpx
import pytest

from weight_tracker.data.api_client import WeightApiClient
from weight_tracker.state import CurrentValueController, ValueCell


@pytest.fixture
def controller(client):
    ctrl = CurrentValueController(client)
    yield ctrl
    ctrl.close()


def test_initialize_loads_value(controller) -> None:
    assert controller.initialize() is True
    assert controller.cell.value == 82.3
    assert controller.last_error is None


def test_increase_after_load_posts_once(controller, backend) -> None:
    controller.initialize()

    controller.increase().result()

    assert controller.cell.value == 82.4
    assert backend.posts == [{"point": 82.4}]


def test_decrease_posts_rounded_value(controller, backend) -> None:
    controller.initialize()

    controller.decrease().result()

    assert controller.cell.value == 82.2
    assert backend.posts == [{"point": 82.2}]


@pytest.mark.parametrize("start", [70.0, 82.3, 99.9, 0.1])
def test_increase_then_decrease_round_trips(client, backend, start) -> None:
    with CurrentValueController(client, cell=ValueCell(start)) as ctrl:
        ctrl.increase().result()
        ctrl.decrease().result()

        assert ctrl.cell.value == start
    assert len(backend.posts) == 2


def test_every_step_is_its_own_write(controller, backend) -> None:
    controller.initialize()

    futures = [controller.increase() for _ in range(3)]
    for future in futures:
        future.result()

    assert controller.cell.value == 82.6
    assert sorted(p["point"] for p in backend.posts) == [82.4, 82.5, 82.6]


def test_edit_coerces_text_before_posting(controller, backend) -> None:
    controller.initialize()

    controller.edit(" 81.7 ").result()

    assert controller.cell.value == 81.7
    assert backend.posts == [{"point": 81.7}]


def test_edit_with_non_number_does_not_post(controller, backend) -> None:
    assert controller.edit("abc") is None

    assert controller.cell.value == "abc"
    assert backend.posts == []
    assert "abc" in controller.last_error


def test_step_before_load_is_ignored(controller, backend) -> None:
    assert controller.increase() is None
    assert controller.decrease() is None

    assert controller.cell.value is None
    assert backend.posts == []


def test_failed_load_leaves_cell_unset(controller, backend) -> None:
    backend.fail_status["/api/current"] = 503

    assert controller.initialize() is False
    assert controller.cell.value is None
    assert "503" in controller.last_error


def test_unreachable_backend_leaves_cell_unset(settings) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with WeightApiClient(settings, transport=httpx.MockTransport(refuse)) as api:
        with CurrentValueController(api) as ctrl:
            assert ctrl.initialize() is False
            assert ctrl.cell.value is None


def test_failed_write_keeps_local_value(controller, backend, caplog) -> None:
    controller.initialize()
    backend.fail_status["/api/current"] = 500

    future = controller.increase()
    with pytest.raises(httpx.HTTPStatusError):
        future.result()
    controller.close()

    assert controller.cell.value == 82.4
    assert "rejected: HTTP 500" in caplog.text


def test_cell_handlers_see_each_change(controller) -> None:
    seen: list = []
    controller.cell.subscribe(seen.append)

    controller.initialize()
    controller.increase().result()

    assert seen == [82.3, 82.4]

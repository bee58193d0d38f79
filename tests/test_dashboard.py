"""Tests for the Streamlit dashboard binding, run headless with AppTest."""

from __future__ import annotations

import time
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest


DASHBOARD = str(Path(__file__).resolve().parents[1] / "weight_tracker" / "ui" / "dashboard.py")


def _wait_for_posts(backend, count: int, timeout: float = 5.0) -> None:
    # writes land from the background pool
    deadline = time.monotonic() + timeout
    while len(backend.posts) < count and time.monotonic() < deadline:
        time.sleep(0.01)


@pytest.fixture
def app(client):
    at = AppTest.from_file(DASHBOARD, default_timeout=10)
    at.session_state["client"] = client
    return at


def test_input_shows_loaded_value(app) -> None:
    app.run()

    assert not app.exception
    assert app.number_input(key="current_weight").value == 82.3
    assert not app.button(key="increase").disabled


def test_increase_button_updates_input_and_posts_once(app, backend) -> None:
    app.run()

    app.button(key="increase").click().run()
    _wait_for_posts(backend, 1)

    assert app.number_input(key="current_weight").value == 82.4
    assert backend.posts == [{"point": 82.4}]


def test_decrease_button_posts_rounded_value(app, backend) -> None:
    app.run()

    app.button(key="decrease").click().run()
    _wait_for_posts(backend, 1)

    assert app.number_input(key="current_weight").value == 82.2
    assert backend.posts == [{"point": 82.2}]


def test_direct_edit_posts_new_value(app, backend) -> None:
    app.run()

    app.number_input(key="current_weight").set_value(79.5).run()
    _wait_for_posts(backend, 1)

    assert app.session_state["controller"].cell.value == 79.5
    assert backend.posts == [{"point": 79.5}]


def test_failed_load_disables_buttons_and_warns(app, backend) -> None:
    backend.fail_status["/api/current"] = 503

    app.run()

    assert not app.exception
    assert app.number_input(key="current_weight").value is None
    assert app.button(key="increase").disabled
    assert app.button(key="decrease").disabled
    assert any("503" in w.value for w in app.warning)
    assert backend.posts == []


def test_failed_series_load_warns_without_touching_current(app, backend) -> None:
    backend.fail_status["/api/series"] = 500

    app.run()

    assert not app.exception
    assert app.number_input(key="current_weight").value == 82.3
    assert any("500" in w.value for w in app.warning)


def test_sessions_share_the_write_pool(app) -> None:
    app.run()

    controller = app.session_state["controller"]
    assert controller._owns_executor is False
    assert controller.executor is not None

"""Streamlit dashboard for the tracked weight.

Two independent regions:
- Current weight: number input plus +/- buttons, each change is posted
- History: raw points and backend average, loaded once per session
"""

from concurrent.futures import ThreadPoolExecutor

import streamlit as st

from weight_tracker.charts import SeriesChartRenderer
from weight_tracker.config import Settings, WEIGHT_STEP
from weight_tracker.data.api_client import WeightApiClient
from weight_tracker.state import CurrentValueController


INPUT_KEY = "current_weight"


def _mirror_to_input(value) -> None:
    st.session_state[INPUT_KEY] = value


@st.cache_resource
def get_client() -> WeightApiClient:
    """One HTTP client for every session; httpx.Client is thread-safe."""
    return WeightApiClient(Settings())


@st.cache_resource
def get_write_pool() -> ThreadPoolExecutor:
    """One background pool for every session's writes."""
    return ThreadPoolExecutor(max_workers=4, thread_name_prefix="weight-sync")


def get_session() -> tuple[CurrentValueController, SeriesChartRenderer]:
    """Build the controller and renderer once per browser session.

    A "client" already in session state is used instead of the shared one.
    """
    if "controller" not in st.session_state:
        client = st.session_state.get("client") or get_client()
        controller = CurrentValueController(client, executor=get_write_pool())
        controller.cell.subscribe(_mirror_to_input)
        controller.initialize()
        st.session_state.controller = controller
        st.session_state.renderer = SeriesChartRenderer(client)
    return st.session_state.controller, st.session_state.renderer


# =============================================================================
# CURRENT WEIGHT
# =============================================================================

def render_current_panel(controller: CurrentValueController) -> None:
    """Render the editable current weight with step buttons."""
    if INPUT_KEY not in st.session_state:
        st.session_state[INPUT_KEY] = controller.cell.value

    ready = controller.cell.is_set

    col_minus, col_value, col_plus = st.columns([1, 3, 1])
    with col_minus:
        st.button(
            f"-{WEIGHT_STEP}", key="decrease", on_click=controller.decrease,
            disabled=not ready, use_container_width=True,
        )
    with col_value:
        st.number_input(
            "Current weight",
            key=INPUT_KEY,
            step=WEIGHT_STEP,
            format="%.1f",
            on_change=lambda: controller.edit(st.session_state[INPUT_KEY]),
            label_visibility="collapsed",
        )
    with col_plus:
        st.button(
            f"+{WEIGHT_STEP}", key="increase", on_click=controller.increase,
            disabled=not ready, use_container_width=True,
        )

    if not ready and controller.last_error:
        st.warning(controller.last_error)


# =============================================================================
# HISTORY CHART
# =============================================================================

def render_series_chart(renderer: SeriesChartRenderer) -> None:
    """Render the series chart, fetched on first call only."""
    fig = renderer.load()
    if fig is None:
        if renderer.last_error:
            st.warning(renderer.last_error)
        return

    fig.update_layout(height=420, margin=dict(l=0, r=0, t=30, b=0))
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


# =============================================================================
# MAIN APP
# =============================================================================

def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Weight",
        page_icon="",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    try:
        controller, renderer = get_session()
    except ValueError as e:
        st.error(f"Configuration error: {e}")
        return

    st.markdown("### Today")
    render_current_panel(controller)

    st.markdown("### History")
    render_series_chart(renderer)


if __name__ == "__main__":
    main()

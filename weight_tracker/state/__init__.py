"""Client-side state for the current weight."""

from weight_tracker.state.value_cell import ValueCell, round_to_tenth
from weight_tracker.state.controller import CurrentValueController

__all__ = ["ValueCell", "round_to_tenth", "CurrentValueController"]

"""Response curve evaluation and editing."""

from .editing import (
    DEFAULT_INSERT_INPUT,
    add_point,
    apply_preset,
    find_insert_input,
    remove_point,
    update_point,
)
from .evaluator import evaluate, interpolate, sample_response
from .presets import PRESET_POINTS, preset_curve

__all__ = [
    "DEFAULT_INSERT_INPUT",
    "PRESET_POINTS",
    "add_point",
    "apply_preset",
    "evaluate",
    "find_insert_input",
    "interpolate",
    "preset_curve",
    "remove_point",
    "sample_response",
    "update_point",
]

"""Curve editing operations.

Every operation takes a curve value and returns a new one; the argument is
never mutated, so a curve read from the settings store can be edited and
written back without aliasing.
"""

import logging

from controlshaper.exceptions import CurvePointIndexError
from controlshaper.models import Curve, CurvePoint, CurvePreset, PointField

from .presets import preset_curve

logger = logging.getLogger(__name__)

# Abscissa used for the first point of an empty curve
DEFAULT_INSERT_INPUT = 0.5


def _editable(curve: Curve | None) -> Curve:
    """Curve to edit: a missing or reset curve starts out empty."""
    if curve is None or curve.reset:
        return Curve()
    return curve


def _validate_index(curve: Curve, index: int) -> None:
    """
    Validate that a point index is within range.

    Raises:
        CurvePointIndexError: If index is out of range (negative indices included)
    """
    if not 0 <= index < len(curve.points):
        raise CurvePointIndexError(index, len(curve.points))


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def find_insert_input(curve: Curve | None) -> float:
    """
    Pick the input value for a new point.

    Looks for the largest gap between consecutive inputs, counting the gaps
    from 0 to the first point and from the last point to 1. The earliest gap
    wins a tie. The new input is the midpoint of that gap.

    Args:
        curve: Curve to extend, or None

    Returns:
        Input value for the new point (0.5 for an empty curve)
    """
    inputs = [p.in_ for p in _editable(curve).points]
    if not inputs:
        return DEFAULT_INSERT_INPUT

    gap_start = 0.0
    max_gap = inputs[0]

    for lower, upper in zip(inputs, inputs[1:]):
        gap = upper - lower
        if gap > max_gap:
            max_gap = gap
            gap_start = lower

    end_gap = 1 - inputs[-1]
    if end_gap > max_gap:
        gap_start = inputs[-1]
        max_gap = end_gap

    return gap_start + max_gap / 2


def add_point(curve: Curve | None) -> Curve:
    """
    Insert a point in the largest gap, seeded on the identity line.

    Args:
        curve: Curve to extend, or None for a new curve

    Returns:
        New curve with the point added, sorted by input
    """
    base = _editable(curve)
    new_in = find_insert_input(base)
    logger.debug(f"Adding curve point at in={new_in}")
    return Curve(points=[*base.points, CurvePoint.at(new_in, new_in)])


def remove_point(curve: Curve, index: int) -> Curve:
    """
    Remove the point at ``index`` (position in input order).

    Raises:
        CurvePointIndexError: If index is out of range
    """
    _validate_index(curve, index)
    points = [p for i, p in enumerate(curve.points) if i != index]
    return Curve(reset=curve.reset, points=points)


def update_point(curve: Curve, index: int, field: PointField, value: float) -> Curve:
    """
    Set one coordinate of a point, clamped to 0-1.

    Moving a point's input onto another point's input replaces that other
    point. The returned curve is re-sorted, so the point may end up at a
    different index.

    Args:
        curve: Curve to edit
        index: Position of the point in input order
        field: Which coordinate to set
        value: New coordinate value

    Returns:
        New curve with the point updated

    Raises:
        CurvePointIndexError: If index is out of range
    """
    _validate_index(curve, index)
    clamped = _clamp(value)
    target = curve.points[index]

    if field is PointField.IN:
        updated = CurvePoint.at(clamped, target.out)
    else:
        updated = CurvePoint.at(target.in_, clamped)

    others = [
        p for i, p in enumerate(curve.points)
        if i != index and p.in_ != updated.in_
    ]
    return Curve(points=[*others, updated])


def apply_preset(name: str | CurvePreset, current: Curve | None = None) -> Curve | None:
    """
    Replace a curve with a preset shape.

    Unknown preset names are logged and leave the curve unchanged.

    Args:
        name: Preset name (linear, smooth, aggressive, precise)
        current: Curve to return when the name is unknown

    Returns:
        The preset curve, or ``current`` for an unknown name
    """
    try:
        preset = CurvePreset(name)
    except ValueError:
        logger.warning(f"Unknown curve preset: {name!r}")
        return current

    logger.debug(f"Applying curve preset {preset.value}")
    return preset_curve(preset)

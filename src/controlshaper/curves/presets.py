"""Built-in response curve presets.

Fixed point lists, monotonically increasing on both axes. They are
constants, not derived from any formula.
"""

from controlshaper.models import Curve, CurvePreset

PRESET_POINTS: dict[CurvePreset, tuple[tuple[float, float], ...]] = {
    CurvePreset.LINEAR: (),
    CurvePreset.SMOOTH: (
        (0.2, 0.05),
        (0.4, 0.15),
        (0.6, 0.35),
        (0.8, 0.65),
    ),
    CurvePreset.AGGRESSIVE: (
        (0.1, 0.015),
        (0.2, 0.02),
        (0.3, 0.04),
        (0.4, 0.06),
        (0.5, 0.08),
        (0.6, 0.15),
        (0.7, 0.26),
        (0.8, 0.38),
        (0.9, 0.58),
    ),
    CurvePreset.PRECISE: (
        (0.1, 0.02),
        (0.3, 0.08),
        (0.5, 0.20),
        (0.7, 0.45),
        (0.9, 0.80),
    ),
}


def preset_curve(preset: CurvePreset) -> Curve:
    """Build a fresh curve for a preset (linear is an empty, non-reset curve)."""
    return Curve.from_pairs(list(PRESET_POINTS[preset]))

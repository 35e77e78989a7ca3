"""Response curve evaluation.

Pure functions, safe to call once per pixel from a drawing loop. The
arithmetic keeps a fixed operation order so results are reproducible on
IEEE doubles.
"""

from collections.abc import Iterable

from controlshaper.models import Curve, CurvePoint


def interpolate(value: float, points: Iterable[CurvePoint]) -> float:
    """
    Evaluate a piecewise-linear curve through ``points``.

    Below the first point the response scales linearly from the origin;
    above the last point it extrapolates linearly toward the fixed endpoint
    (1, 1). Points need not be sorted.

    Args:
        value: Normalized input (0-1)
        points: Curve control points

    Returns:
        Normalized output; ``value`` itself when there are no points
    """
    ordered = sorted(points, key=lambda p: p.in_)
    if not ordered:
        return value

    first = ordered[0]
    last = ordered[-1]

    if value <= first.in_:
        if first.in_ == 0:
            return first.out
        return first.out * (value / first.in_)

    if value >= last.in_:
        if last.in_ == 1:
            return last.out
        remaining = value - last.in_
        remaining_range = 1 - last.in_
        output_remaining = 1 - last.out
        return last.out + (remaining / remaining_range) * output_remaining

    lower = ordered[0]
    upper = ordered[-1]
    for point in ordered:
        if point.in_ <= value:
            lower = point
        if point.in_ >= value:
            upper = point
            break

    if lower.in_ == upper.in_:
        return lower.out

    t = (value - lower.in_) / (upper.in_ - lower.in_)
    return lower.out + t * (upper.out - lower.out)


def evaluate(value: float, curve: Curve | None = None, exponent: float | None = None) -> float:
    """
    Evaluate the response of an option at ``value``.

    Only one shaping mechanism applies: curve points take precedence over the
    exponent, and the two are never composed. A reset curve contributes no
    points, so an exponent (if any) applies instead.

    Args:
        value: Normalized input (0-1)
        curve: Effective response curve, or None
        exponent: Effective exponent, or None

    Returns:
        Normalized output
    """
    if curve is not None and curve.has_points:
        return interpolate(value, curve.points)
    if exponent is not None:
        return value ** exponent
    return value


def sample_response(
    curve: Curve | None = None,
    exponent: float | None = None,
    steps: int = 100,
) -> list[tuple[float, float]]:
    """
    Sample the response at ``steps + 1`` evenly spaced inputs from 0 to 1.

    Args:
        curve: Effective response curve, or None
        exponent: Effective exponent, or None
        steps: Number of intervals (must be positive)

    Returns:
        List of (input, output) pairs

    Raises:
        ValueError: If steps is not positive
    """
    if steps < 1:
        raise ValueError(f"steps must be positive, got {steps}")

    samples = []
    for i in range(steps + 1):
        value = i / steps
        samples.append((value, evaluate(value, curve, exponent)))
    return samples

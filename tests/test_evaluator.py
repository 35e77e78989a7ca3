"""Unit tests for response curve evaluation."""

import pytest

from controlshaper.curves import apply_preset, evaluate, interpolate, sample_response
from controlshaper.models import Curve, CurvePoint

INPUTS = [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0]


class TestInterpolate:
    """Test piecewise-linear interpolation."""

    @pytest.fixture
    def points(self):
        return [CurvePoint.at(0.2, 0.05), CurvePoint.at(0.8, 0.65)]

    @pytest.mark.unit
    def test_no_points_is_identity(self):
        """Test an empty point list returns the input."""
        assert interpolate(0.3, []) == 0.3

    @pytest.mark.unit
    def test_endpoints_hit_exactly(self, points):
        """Test the first and last points are reproduced exactly."""
        assert interpolate(points[0].in_, points) == points[0].out
        assert interpolate(points[-1].in_, points) == points[-1].out

    @pytest.mark.unit
    def test_scales_from_origin_below_first_point(self, points):
        """Test inputs below the first point scale linearly from (0, 0)."""
        assert interpolate(0.0, points) == 0.0
        assert interpolate(0.1, points) == pytest.approx(0.025)

    @pytest.mark.unit
    def test_extrapolates_to_one_above_last_point(self, points):
        """Test inputs above the last point run linearly toward (1, 1)."""
        assert interpolate(1.0, points) == pytest.approx(1.0)
        assert interpolate(0.9, points) == pytest.approx(0.825)

    @pytest.mark.unit
    def test_between_points(self, points):
        """Test linear interpolation between neighbouring points."""
        assert interpolate(0.5, points) == pytest.approx(0.35)

    @pytest.mark.unit
    def test_unsorted_points(self, points):
        """Test point order does not matter."""
        assert interpolate(0.5, list(reversed(points))) == pytest.approx(0.35)

    @pytest.mark.unit
    def test_point_at_zero_input(self):
        """Test a first point at in=0 doesn't divide by zero."""
        points = [CurvePoint.at(0.0, 0.2), CurvePoint.at(0.5, 0.5)]
        assert interpolate(0.0, points) == 0.2

    @pytest.mark.unit
    def test_point_at_full_input(self):
        """Test a last point at in=1 doesn't divide by zero."""
        points = [CurvePoint.at(0.5, 0.5), CurvePoint.at(1.0, 0.8)]
        assert interpolate(1.0, points) == 0.8

    @pytest.mark.unit
    def test_exact_interior_point(self):
        """Test an input equal to an interior point returns its output."""
        points = [CurvePoint.at(0.2, 0.1), CurvePoint.at(0.5, 0.3), CurvePoint.at(0.8, 0.9)]
        assert interpolate(0.5, points) == 0.3

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, 0.0), (0.2, 0.1), (0.4, 0.2), (0.7, 0.6), (1.0, 1.0)],
    )
    def test_single_point(self, value, expected):
        """Test a lone point scales from the origin below it and runs to (1, 1) above it."""
        points = [CurvePoint.at(0.4, 0.2)]
        assert interpolate(value, points) == pytest.approx(expected)


class TestEvaluate:
    """Test evaluate with curves and exponents."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", INPUTS)
    def test_reset_curve_is_identity(self, value):
        """Test a reset curve without exponent is the identity."""
        assert evaluate(value, Curve.linear_reset(), None) == value

    @pytest.mark.unit
    @pytest.mark.parametrize("exponent", [0.5, 1.0, 1.5, 3.0])
    def test_exponent_without_curve(self, exponent):
        """Test exponent shaping is a plain power."""
        for value in INPUTS:
            assert evaluate(value, None, exponent) == value ** exponent

    @pytest.mark.unit
    def test_nothing_is_identity(self):
        """Test no curve and no exponent returns the input."""
        assert evaluate(0.42) == 0.42

    @pytest.mark.unit
    def test_curve_takes_precedence_over_exponent(self):
        """Test curve points win and the exponent is ignored."""
        curve = Curve.from_pairs([(0.5, 0.25)])
        assert evaluate(0.5, curve, 2.0) == 0.25
        assert evaluate(1.0, curve, 2.0) == pytest.approx(1.0)

    @pytest.mark.unit
    def test_reset_curve_falls_back_to_exponent(self):
        """Test a reset curve contributes no points, so the exponent applies."""
        assert evaluate(0.5, Curve.linear_reset(), 2.0) == 0.25

    @pytest.mark.unit
    def test_empty_curve_is_identity(self):
        """Test a curve without points behaves like no curve."""
        assert evaluate(0.3, Curve(), None) == 0.3

    @pytest.mark.unit
    def test_smooth_endpoints_scenario(self):
        """Test the documented two-point scenario at both ends of the range."""
        curve = Curve(points=[CurvePoint.at(0.2, 0.05), CurvePoint.at(0.8, 0.65)])
        assert evaluate(0.0, curve, None) == 0.0
        assert evaluate(1.0, curve, None) == pytest.approx(1.0)

    @pytest.mark.unit
    def test_linear_preset_is_identity(self):
        """Test applying the linear preset gives the identity response."""
        curve = apply_preset("linear", Curve.from_pairs([(0.5, 0.1)]))
        for value in INPUTS:
            assert evaluate(value, curve, None) == value


class TestSampleResponse:
    """Test sampling a response over the input range."""

    @pytest.mark.unit
    def test_sample_count_and_range(self):
        """Test steps+1 samples spanning 0 to 1."""
        samples = sample_response(None, None, steps=4)
        assert [value for value, _ in samples] == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert all(value == output for value, output in samples)

    @pytest.mark.unit
    def test_samples_use_exponent(self):
        """Test samples follow the exponent."""
        samples = sample_response(None, 2.0, steps=2)
        assert samples == [(0.0, 0.0), (0.5, 0.25), (1.0, 1.0)]

    @pytest.mark.unit
    def test_invalid_steps(self):
        """Test non-positive step counts are rejected."""
        with pytest.raises(ValueError, match="steps must be positive"):
            sample_response(None, None, steps=0)

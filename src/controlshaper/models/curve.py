"""Response curve models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CurvePoint(BaseModel):
    """One control point of a response curve, both axes normalized to 0-1."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    in_: float = Field(alias="in", ge=0.0, le=1.0, description="Normalized input")
    out: float = Field(ge=0.0, le=1.0, description="Normalized output")

    def as_tuple(self) -> tuple[float, float]:
        """Get (in, out) as tuple."""
        return (self.in_, self.out)

    @classmethod
    def at(cls, in_: float, out: float) -> "CurvePoint":
        """Create a point from positional coordinates."""
        return cls(in_=in_, out=out)


class Curve(BaseModel):
    """A piecewise-linear response curve override.

    ``reset=True`` records an explicit decision to flatten any inherited
    curvature to a linear response, which is different from having no curve
    at all (``None``).

    Points are kept sorted by input and unique per input value. When a
    definition carries two points with the same input, the later one wins.
    """

    reset: bool = Field(default=False, description="Explicit linear reset")
    points: list[CurvePoint] = Field(default_factory=list, description="Control points")

    @field_validator("points")
    @classmethod
    def normalize_points(cls, v: list[CurvePoint]) -> list[CurvePoint]:
        """Drop duplicate inputs (last wins) and sort by input."""
        by_input: dict[float, CurvePoint] = {}
        for point in v:
            by_input[point.in_] = point
        return sorted(by_input.values(), key=lambda p: p.in_)

    @model_validator(mode="after")
    def check_reset_has_no_points(self) -> "Curve":
        """A reset curve cannot carry points."""
        if self.reset and self.points:
            raise ValueError("A reset curve must not have points")
        return self

    @property
    def has_points(self) -> bool:
        """Check if the curve shapes the response (non-reset with points)."""
        return not self.reset and len(self.points) > 0

    @classmethod
    def from_pairs(cls, pairs: list[tuple[float, float]]) -> "Curve":
        """Create a non-reset curve from (in, out) pairs."""
        return cls(points=[CurvePoint.at(i, o) for i, o in pairs])

    @classmethod
    def linear_reset(cls) -> "Curve":
        """Create an explicit linear reset curve."""
        return cls(reset=True)

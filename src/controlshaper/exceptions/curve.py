"""Curve editing exceptions."""

from .base import ControlShaperError


class CurvePointIndexError(ControlShaperError, IndexError):
    """A curve point operation was given an index outside the point list.

    This is a caller bug, not a runtime condition: editing operations fail
    fast instead of clamping the index.
    """

    def __init__(self, index: int, point_count: int):
        """
        Initialize curve point index error.

        Args:
            index: The offending index
            point_count: Number of points in the curve
        """
        if point_count:
            valid = f"0-{point_count - 1}"
        else:
            valid = "none, the curve has no points"

        super().__init__(
            user_message=f"Curve point {index} does not exist",
            technical_message=f"Curve point index {index} out of range ({valid})",
            recoverable=False,
        )
        self.index = index
        self.point_count = point_count

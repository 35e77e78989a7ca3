"""Export projection models."""

from pydantic import BaseModel, Field

from .curve import Curve
from .enums import DeviceType


def format_number(value: float) -> str:
    """Shortest round-tripping text for a float, without a trailing '.0'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class ExportEntry(BaseModel):
    """Effective overrides of one option, flattened for serialization."""

    option_name: str = Field(description="Trailing segment of the option path")
    path: str = Field(description="Full option path")
    invert: int | None = Field(default=None, ge=0, le=1, description="Inversion as a 0/1 flag")
    exponent: float | None = Field(default=None, description="Exponent override")
    curve: Curve | None = Field(default=None, description="Curve override")

    @property
    def attributes(self) -> dict[str, str]:
        """Scalar attributes as strings, in export order."""
        attrs = {}
        if self.invert is not None:
            attrs["invert"] = str(self.invert)
        if self.exponent is not None:
            attrs["exponent"] = format_number(self.exponent)
        return attrs


class DeviceExport(BaseModel):
    """Export projection for one (device type, instance) pair."""

    device_type: DeviceType = Field(description="Device family")
    instance: int = Field(ge=1, description="Device slot")
    entries: list[ExportEntry] = Field(default_factory=list, description="Exported options")

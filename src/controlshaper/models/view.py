"""Resolved view of one option, as a settings panel would display it."""

from pydantic import BaseModel, Field

from .curve import Curve
from .option_tree import OptionNode


class OptionView(BaseModel):
    """Effective settings and visibility of an option for the current session."""

    node: OptionNode = Field(description="The option node")
    show_invert: bool = Field(description="Resolved invert visibility")
    show_curve: bool = Field(description="Resolved curve visibility")
    show_sensitivity: bool = Field(description="Resolved sensitivity visibility")
    invert: bool = Field(description="Effective inversion")
    exponent: float | None = Field(default=None, description="Effective exponent")
    curve: Curve | None = Field(default=None, description="Effective response curve")
    has_overrides: bool = Field(default=False, description="Whether any override is stored")

    @property
    def path(self) -> str:
        """Option path."""
        return self.node.path

    @property
    def has_curve(self) -> bool:
        """Check if a curve applies: a tree default, or an override with points."""
        return self.node.curve is not None or (self.curve is not None and self.curve.has_points)

    @property
    def has_exponent(self) -> bool:
        """Check if an exponent applies."""
        return self.exponent is not None

    @property
    def has_visible_settings(self) -> bool:
        """Check if a settings panel would show anything editable."""
        return self.show_invert or self.show_curve

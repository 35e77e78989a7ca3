"""Enumerations for the control response model."""

from enum import Enum

# Joystick trees share one option tree across up to this many device slots
MAX_JOYSTICK_INSTANCES = 8


class DeviceType(str, Enum):
    """Input device families that carry their own option tree."""

    KEYBOARD = "keyboard"
    GAMEPAD = "gamepad"
    JOYSTICK = "joystick"

    @property
    def is_multi_instance(self) -> bool:
        """Whether settings are kept per physical device slot."""
        return self is DeviceType.JOYSTICK

    @property
    def max_instances(self) -> int:
        """Highest instance number accepted for this device type."""
        return MAX_JOYSTICK_INSTANCES if self.is_multi_instance else 1


class Visibility(str, Enum):
    """Declared visibility of a setting on an option node.

    A node that declares nothing is represented by None and resolves
    exactly like INHERIT.
    """

    SHOWN = "shown"
    HIDDEN = "hidden"
    INHERIT = "inherit"

    @classmethod
    def from_attribute(cls, raw: str | None) -> "Visibility | None":
        """Parse an XML UIShow* attribute (-1 inherit, 0 hidden, 1 shown)."""
        if raw is None:
            return None
        try:
            value = int(raw.strip())
        except ValueError:
            return None
        return {-1: cls.INHERIT, 0: cls.HIDDEN, 1: cls.SHOWN}.get(value)


class VisibilityFlag(str, Enum):
    """Which tri-state flag of an option node to resolve."""

    INVERT = "show_invert"
    CURVE = "show_curve"
    SENSITIVITY = "show_sensitivity"


class SettingName(str, Enum):
    """Settings a user can override per option path."""

    INVERT = "invert"
    EXPONENT = "exponent"
    CURVE = "curve"


class PointField(str, Enum):
    """Coordinate of a curve point."""

    IN = "in"
    OUT = "out"


class CurvePreset(str, Enum):
    """Built-in response curve shapes."""

    LINEAR = "linear"        # No points, identity response
    SMOOTH = "smooth"        # Gentle low-end softening
    AGGRESSIVE = "aggressive"  # Strong dead low end, steep top
    PRECISE = "precise"      # Fine control through the middle

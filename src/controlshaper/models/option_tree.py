"""Option tree models: the per-device hierarchy of configurable options."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .curve import Curve
from .enums import MAX_JOYSTICK_INSTANCES, DeviceType, Visibility, VisibilityFlag

# Fallback tree labels, used when a device type has no loaded definitions
DEFAULT_ROOT_LABELS = {
    DeviceType.KEYBOARD: "Keyboard Settings",
    DeviceType.GAMEPAD: "Gamepad Settings",
    DeviceType.JOYSTICK: "Joystick Settings",
}


class OptionNode(BaseModel):
    """One entry in a device's option hierarchy.

    Nodes are immutable once loaded. Visibility flags hold only what the
    node itself declares; inheritance is resolved on demand by
    `controlshaper.tree.resolver.resolve_visibility`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Identifier segment, unique among siblings")
    path: str = Field(
        description="Dot-joined names from the root to this node (empty for an unnamed root)"
    )
    label: str = Field(description="Raw display label (may carry an @ui_ key)")
    device_type: DeviceType = Field(description="Device family owning the tree")
    show_invert: Visibility | None = Field(default=None, description="Declared invert visibility")
    show_curve: Visibility | None = Field(default=None, description="Declared curve visibility")
    show_sensitivity: Visibility | None = Field(
        default=None, description="Declared sensitivity visibility"
    )
    invert: bool = Field(default=False, description="Default inversion")
    invert_cvar: str | None = Field(default=None, description="Linked external variable")
    exponent: float | None = Field(default=None, gt=0.0, description="Default exponent")
    curve: Curve | None = Field(default=None, description="Default response curve")
    children: tuple["OptionNode", ...] = Field(default=(), description="Child options")

    @model_validator(mode="after")
    def check_child_paths(self) -> "OptionNode":
        """Each child's path must extend this node's path by its own name.

        A root with an empty path (an unnamed tree) gives its children their
        bare names as paths.
        """
        for child in self.children:
            expected = f"{self.path}.{child.name}" if self.path else child.name
            if child.path != expected:
                raise ValueError(
                    f"Child path '{child.path}' of '{self.path}' should be '{expected}'"
                )
        return self

    def declared(self, flag: VisibilityFlag) -> Visibility | None:
        """Get the visibility this node itself declares for a flag."""
        return getattr(self, flag.value)

    @property
    def is_leaf(self) -> bool:
        """Check if the node has no children."""
        return not self.children

    def get_child(self, name: str) -> "OptionNode | None":
        """Get the first child with the given name."""
        for child in self.children:
            if child.name == name:
                return child
        return None


class OptionTree(BaseModel):
    """A device type's option tree plus its tree-level attributes."""

    model_config = ConfigDict(frozen=True)

    device_type: DeviceType = Field(description="Device family")
    root: OptionNode = Field(description="Root option node")
    instances: int = Field(
        default=1, ge=1, le=MAX_JOYSTICK_INSTANCES, description="Number of device slots"
    )
    # UI slider bounds only; nothing in this package evaluates them
    sensitivity_min: float = Field(default=0.01, description="Sensitivity slider minimum")
    sensitivity_max: float = Field(default=2.0, description="Sensitivity slider maximum")

    @property
    def is_empty(self) -> bool:
        """Check if the tree defines no options below the root."""
        return self.root.is_leaf

    @classmethod
    def empty(cls, device_type: DeviceType) -> "OptionTree":
        """Create the fallback tree for a device type with no definitions."""
        root = OptionNode(
            name="root",
            path="",
            label=DEFAULT_ROOT_LABELS[device_type],
            device_type=device_type,
        )
        return cls(
            device_type=device_type,
            root=root,
            instances=device_type.max_instances,
        )

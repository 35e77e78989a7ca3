"""Overlay models: user overrides layered atop option tree defaults."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

from .curve import Curve
from .enums import DeviceType, SettingName


class OptionSettings(BaseModel):
    """Overrides recorded for one option path.

    A setting is only an override once it has been written; unwritten
    settings fall back to the option node's defaults. Written settings are
    tracked by pydantic's ``model_fields_set``.
    """

    model_config = ConfigDict(validate_assignment=True)

    invert: bool | None = Field(default=None, description="Inversion override")
    exponent: float | None = Field(default=None, gt=0.0, description="Exponent override")
    curve: Curve | None = Field(default=None, description="Response curve override")

    @model_serializer(mode="wrap")
    def serialize_written(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Serialize only the settings that have been written."""
        data = handler(self)
        return {key: value for key, value in data.items() if key in self.model_fields_set}

    def is_set(self, setting: SettingName) -> bool:
        """Check if a setting has been written."""
        return setting.value in self.model_fields_set

    def get(self, setting: SettingName) -> Any:
        """Get the raw stored value of a setting."""
        return getattr(self, setting.value)

    @property
    def is_empty(self) -> bool:
        """Check if no setting has been written."""
        return not self.model_fields_set


class ControlSettings(BaseModel):
    """Serializable snapshot of a session's whole overlay.

    Layout: device type -> instance -> option path -> overrides.
    """

    devices: dict[DeviceType, dict[int, dict[str, OptionSettings]]] = Field(
        default_factory=dict, description="Overrides per device type and instance"
    )

    def count_overrides(self) -> int:
        """Count option paths with at least one override."""
        return sum(
            len(paths)
            for instances in self.devices.values()
            for paths in instances.values()
        )

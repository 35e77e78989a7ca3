"""Settings overlay store: user overrides keyed by device, instance and option path."""

import logging
from typing import Any

from pydantic import BaseModel

from controlshaper.models import ControlSettings, DeviceType, OptionSettings, SettingName

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Holds the overrides of one editing session.

    Overrides are indexed as (device type, instance) -> option path ->
    setting. Only joysticks have real instances (1-8); every other device
    type is stored under instance 1 whatever instance the caller passes.

    The store knows nothing about option trees: readers pass the node's
    default as the fallback. A path entry is created on its first write and
    removed by `reset_path`.

    Values are copied on the way in and out, so editing a curve obtained
    from `get` never changes the stored override until it is `set` again.
    """

    def __init__(self, settings: ControlSettings | None = None):
        """
        Initialize the store.

        Args:
            settings: Snapshot to start from (copied), or None for an empty store
        """
        self._settings = settings.model_copy(deep=True) if settings else ControlSettings()

    # =================================================================
    # Keys
    # =================================================================

    @staticmethod
    def normalize_instance(device_type: DeviceType, instance: int = 1) -> int:
        """
        Map a caller's instance number onto the stored instance.

        Raises:
            ValueError: If a joystick instance is outside 1-8
        """
        if not device_type.is_multi_instance:
            return 1
        if not 1 <= instance <= device_type.max_instances:
            raise ValueError(
                f"Instance {instance} out of range for {device_type.value} "
                f"(1-{device_type.max_instances})"
            )
        return instance

    def _paths(
        self, device_type: DeviceType, instance: int, create: bool = False
    ) -> dict[str, OptionSettings] | None:
        instance = self.normalize_instance(device_type, instance)
        instances = self._settings.devices.get(device_type)
        if instances is None:
            if not create:
                return None
            instances = self._settings.devices[device_type] = {}

        paths = instances.get(instance)
        if paths is None and create:
            paths = instances[instance] = {}
        return paths

    # =================================================================
    # Access
    # =================================================================

    def get(
        self,
        device_type: DeviceType,
        instance: int,
        path: str,
        setting: SettingName,
        fallback: Any = None,
    ) -> Any:
        """
        Get an override, or ``fallback`` when none was written.

        Args:
            device_type: Device family
            instance: Device slot (ignored for non-joystick types)
            path: Option path
            setting: Setting to read
            fallback: Value to return without an override (usually the node default)

        Returns:
            The stored override or the fallback
        """
        paths = self._paths(device_type, instance)
        entry = paths.get(path) if paths else None
        if entry is None or not entry.is_set(setting):
            return fallback

        value = entry.get(setting)
        if isinstance(value, BaseModel):
            return value.model_copy(deep=True)
        return value

    def set(
        self,
        device_type: DeviceType,
        instance: int,
        path: str,
        setting: SettingName,
        value: Any,
    ) -> None:
        """
        Write an override, replacing any previous value for the same key.

        Args:
            device_type: Device family
            instance: Device slot (ignored for non-joystick types)
            path: Option path
            setting: Setting to write
            value: bool for invert, positive float for exponent, Curve for curve

        Raises:
            ValueError: If the instance is out of range
            pydantic.ValidationError: If the value is invalid for the setting
        """
        existing = self._paths(device_type, instance)
        entry = existing.get(path) if existing else None
        if entry is None:
            entry = OptionSettings()

        if isinstance(value, BaseModel):
            value = value.model_copy(deep=True)
        setattr(entry, setting.value, value)

        # Containers are only created once the value has validated
        paths = self._paths(device_type, instance, create=True)
        paths[path] = entry
        logger.debug(
            f"Set {device_type.value}[{self.normalize_instance(device_type, instance)}] "
            f"{path}.{setting.value} = {value!r}"
        )

    def reset_path(self, device_type: DeviceType, instance: int, path: str) -> bool:
        """
        Remove every override of one option path.

        Sibling and descendant paths are untouched.

        Returns:
            True if anything was removed
        """
        paths = self._paths(device_type, instance)
        if not paths or path not in paths:
            return False

        del paths[path]
        normalized = self.normalize_instance(device_type, instance)
        if not paths:
            instances = self._settings.devices[device_type]
            del instances[normalized]
            if not instances:
                del self._settings.devices[device_type]

        logger.debug(f"Reset {device_type.value}[{normalized}] {path}")
        return True

    def reset_all(self) -> None:
        """Remove every override."""
        self._settings = ControlSettings()
        logger.debug("Reset all settings")

    # =================================================================
    # Inspection
    # =================================================================

    def has_overrides(
        self, device_type: DeviceType, instance: int, path: str | None = None
    ) -> bool:
        """Check if the pair (or one path of it) has any override."""
        paths = self._paths(device_type, instance)
        if not paths:
            return False
        if path is None:
            return True
        return path in paths

    def paths(self, device_type: DeviceType, instance: int) -> list[str]:
        """Option paths with overrides, in first-write order."""
        paths = self._paths(device_type, instance)
        return list(paths) if paths else []

    def items(self, device_type: DeviceType, instance: int) -> list[tuple[str, OptionSettings]]:
        """Copies of (path, overrides) pairs, in first-write order."""
        paths = self._paths(device_type, instance)
        if not paths:
            return []
        return [(path, entry.model_copy(deep=True)) for path, entry in paths.items()]

    @property
    def is_empty(self) -> bool:
        """Check if no override exists at all."""
        return not self._settings.devices

    # =================================================================
    # Snapshots
    # =================================================================

    def snapshot(self) -> ControlSettings:
        """Get a deep copy of the whole overlay."""
        return self._settings.model_copy(deep=True)

    def load(self, settings: ControlSettings) -> None:
        """Replace the whole overlay with a copy of ``settings``."""
        self._settings = settings.model_copy(deep=True)
        logger.debug(f"Loaded {settings.count_overrides()} option override(s)")

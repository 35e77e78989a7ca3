"""Editor service for a controls editing session."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from controlshaper.curves import (
    add_point,
    apply_preset,
    evaluate,
    remove_point,
    sample_response,
    update_point,
)
from controlshaper.exceptions import MissingOptionTreeError
from controlshaper.models import (
    ControlSettings,
    Curve,
    CurvePreset,
    DeviceType,
    EditorConfig,
    OptionNode,
    OptionTree,
    OptionView,
    PointField,
    SettingName,
    VisibilityFlag,
)
from controlshaper.protocols import SettingsEvent, SettingsObserver
from controlshaper.tree import find_node_by_path, find_node_chain, load_option_trees, resolve_visibility
from controlshaper.utils import ObserverManager, PydanticPersistence

from .settings_store import SettingsStore

logger = logging.getLogger(__name__)


class ControlsEditorService:
    """
    Owns one controls editing session.

    The session holds the loaded option trees (read-only), the current
    device type, joystick instance and selected option, and the settings
    store with the user's overrides. Every read resolves an override first
    and falls back to the option node's default.

    Event-Driven Architecture:
        Every change to the overlay or to the device/instance selection
        emits a SettingsEvent to registered observers, so a rendering layer
        can redraw without polling.

    Threading:
        Sessions are single-threaded: each call completes its mutation
        before returning. Independent sessions must use independent stores.
    """

    def __init__(
        self,
        trees: Optional[Mapping[DeviceType, OptionTree]] = None,
        store: Optional[SettingsStore] = None,
        device_type: DeviceType = DeviceType.KEYBOARD,
    ):
        """
        Initialize the editor service.

        Args:
            trees: Loaded option trees; device types without one get an empty tree
            store: Settings store to edit (a new empty store if None)
            device_type: Device type selected at start
        """
        self._trees: dict[DeviceType, OptionTree] = dict(trees or {})
        self._store = store if store is not None else SettingsStore()
        self._device_type = device_type
        self._instance = 1
        self._selected_path: Optional[str] = None
        self._unsaved = False

        self._observers = ObserverManager[SettingsObserver](observer_type_name="settings")
        logger.info(
            f"ControlsEditorService initialized with trees for "
            f"{sorted(dt.value for dt in self._trees) or 'no device types'}"
        )

    @classmethod
    def from_config(cls, config: EditorConfig) -> "ControlsEditorService":
        """
        Create a session from the editor configuration.

        Loads the option trees from ``config.option_tree_path`` (when set) and
        the saved overrides from ``config.settings_path`` (when it exists).

        Raises:
            OptionTreeFileError: If the tree file cannot be read
            OptionTreeParseError: If the tree file is not well-formed XML
            ConfigurationError: If the settings file is invalid
        """
        trees = load_option_trees(config.option_tree_path) if config.option_tree_path else {}
        service = cls(trees=trees, device_type=config.default_device_type)
        if config.settings_path.exists():
            service.load(config.settings_path)
        return service

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: SettingsObserver) -> None:
        """Register an observer to receive settings events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: SettingsObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def _notify_observers(self, event: SettingsEvent, **kwargs: Any) -> None:
        self._observers.notify('on_settings_event', event, **kwargs)

    # =================================================================
    # Session state
    # =================================================================

    @property
    def store(self) -> SettingsStore:
        """Get the settings store being edited."""
        return self._store

    @property
    def device_type(self) -> DeviceType:
        """Get the current device type."""
        return self._device_type

    @property
    def instance(self) -> int:
        """Get the current instance (always 1 for non-joystick device types)."""
        return SettingsStore.normalize_instance(self._device_type, self._instance)

    @property
    def has_unsaved_changes(self) -> bool:
        """Check if the overlay changed since the last save or load."""
        return self._unsaved

    def mark_saved(self) -> None:
        """Flag the overlay as saved (e.g. after an external save routine)."""
        self._unsaved = False

    def get_tree(self, device_type: Optional[DeviceType] = None) -> OptionTree:
        """
        Get a device type's option tree.

        A device type whose tree failed to load gets an empty tree, so the
        session shows "no settings" for it instead of failing.
        """
        device_type = device_type or self._device_type
        tree = self._trees.get(device_type)
        if tree is None:
            logger.debug(f"No option tree for {device_type.value}, using empty tree")
            return OptionTree.empty(device_type)
        return tree

    def require_tree(self, device_type: Optional[DeviceType] = None) -> OptionTree:
        """
        Get a device type's loaded option tree.

        Raises:
            MissingOptionTreeError: If no tree was loaded for the device type
        """
        device_type = device_type or self._device_type
        tree = self._trees.get(device_type)
        if tree is None:
            raise MissingOptionTreeError(device_type)
        return tree

    def switch_device_type(self, device_type: DeviceType) -> None:
        """
        Make another device type current. Clears the selection.
        """
        if device_type == self._device_type:
            return

        self._device_type = device_type
        self._selected_path = None
        self._notify_observers(
            SettingsEvent.DEVICE_SWITCHED, device_type=device_type, instance=self.instance
        )
        logger.info(f"Switched to {device_type.value}")

    def switch_instance(self, instance: int) -> None:
        """
        Make another joystick instance current. Clears the selection.

        Only valid while the joystick is the current device; other devices
        always edit instance 1.

        Raises:
            ValueError: If the current device is not the joystick, or the
                instance is outside the joystick tree's instances
        """
        if not self._device_type.is_multi_instance:
            raise ValueError(
                f"{self._device_type.value} has a single instance; switch to joystick first"
            )

        available = self.get_tree(DeviceType.JOYSTICK).instances
        if not 1 <= instance <= available:
            raise ValueError(f"Joystick instance {instance} out of range (1-{available})")

        if instance == self._instance:
            return

        self._instance = instance
        self._selected_path = None
        self._notify_observers(
            SettingsEvent.INSTANCE_SWITCHED, device_type=self._device_type, instance=instance
        )
        logger.info(f"Switched to joystick instance {instance}")

    # =================================================================
    # Selection and lookup
    # =================================================================

    def find_node(self, path: str, device_type: Optional[DeviceType] = None) -> Optional[OptionNode]:
        """Find a node by path in a device type's tree (None if not found)."""
        return find_node_by_path(self.get_tree(device_type).root, path)

    def select_node(self, path: str) -> Optional[OptionNode]:
        """
        Select the option at ``path`` in the current tree.

        Returns:
            The selected node, or None (and no selection) if the path doesn't resolve
        """
        node = self.find_node(path)
        self._selected_path = self._settings_key(node) if node else None
        if node is None:
            logger.debug(f"No option at {path!r} for {self._device_type.value}")
        return node

    def clear_selection(self) -> None:
        """Clear the selected option."""
        self._selected_path = None

    @property
    def selected_node(self) -> Optional[OptionNode]:
        """Get the selected node, if any."""
        if self._selected_path is None:
            return None
        return self.find_node(self._selected_path)

    @staticmethod
    def _settings_key(node: OptionNode) -> str:
        # The unnamed root has an empty path; its name still resolves to it
        return node.path or node.name

    def _resolve_path(self, path: Optional[str]) -> str:
        """Settings key for ``path`` (or the selection), with or without the root prefix."""
        if path is not None:
            node = self.find_node(path)
            return self._settings_key(node) if node else path
        if self._selected_path is None:
            raise ValueError("No option path given and no option selected")
        return self._selected_path

    def get_option_view(self, path: Optional[str] = None) -> Optional[OptionView]:
        """
        Resolve what a settings panel shows for an option.

        Args:
            path: Option path (defaults to the selected option)

        Returns:
            The resolved view, or None if the path doesn't resolve
        """
        if path is None and self._selected_path is None:
            return None
        path = self._resolve_path(path)

        chain = find_node_chain(self.get_tree().root, path)
        if chain is None:
            return None
        node, ancestors = chain[-1], chain[:-1]

        return OptionView(
            node=node,
            show_invert=resolve_visibility(node, ancestors, VisibilityFlag.INVERT),
            show_curve=resolve_visibility(node, ancestors, VisibilityFlag.CURVE),
            show_sensitivity=resolve_visibility(node, ancestors, VisibilityFlag.SENSITIVITY),
            invert=self.get_user_setting(path, SettingName.INVERT, node.invert),
            exponent=self.get_user_setting(path, SettingName.EXPONENT, node.exponent),
            curve=self.get_user_setting(path, SettingName.CURVE, node.curve),
            has_overrides=self._store.has_overrides(self._device_type, self.instance, path),
        )

    # =================================================================
    # Settings access
    # =================================================================

    def get_user_setting(self, path: str, setting: SettingName, fallback: Any = None) -> Any:
        """Get an override for the current device/instance, or ``fallback``."""
        path = self._resolve_path(path)
        return self._store.get(self._device_type, self.instance, path, setting, fallback)

    def set_user_setting(self, path: str, setting: SettingName, value: Any) -> None:
        """
        Write an override for the current device/instance.

        Raises:
            pydantic.ValidationError: If the value is invalid for the setting
        """
        path = self._resolve_path(path)
        self._store.set(self._device_type, self.instance, path, setting, value)
        self._unsaved = True
        self._notify_observers(
            SettingsEvent.SETTING_CHANGED,
            device_type=self._device_type,
            instance=self.instance,
            path=path,
            setting=setting,
            value=value,
        )

    def _node_default(self, path: str, setting: SettingName) -> Any:
        node = self.find_node(path)
        if node is None:
            return None
        return getattr(node, setting.value)

    def effective_curve(self, path: Optional[str] = None) -> Optional[Curve]:
        """Get the override curve, else the node's default curve."""
        path = self._resolve_path(path)
        return self.get_user_setting(path, SettingName.CURVE, self._node_default(path, SettingName.CURVE))

    def effective_exponent(self, path: Optional[str] = None) -> Optional[float]:
        """Get the override exponent, else the node's default exponent."""
        path = self._resolve_path(path)
        return self.get_user_setting(
            path, SettingName.EXPONENT, self._node_default(path, SettingName.EXPONENT)
        )

    def set_invert(self, inverted: bool, path: Optional[str] = None) -> None:
        """Override inversion for an option (defaults to the selected option)."""
        path = self._resolve_path(path)
        self.set_user_setting(path, SettingName.INVERT, inverted)
        logger.info(f"Set invert={inverted} on {path}")

    def set_exponent(self, exponent: float, path: Optional[str] = None) -> None:
        """Override the exponent for an option (defaults to the selected option)."""
        path = self._resolve_path(path)
        self.set_user_setting(path, SettingName.EXPONENT, exponent)
        logger.info(f"Set exponent={exponent} on {path}")

    # =================================================================
    # Curve editing
    # =================================================================

    def add_curve_point(self, path: Optional[str] = None) -> Curve:
        """
        Add a point in the largest gap of the option's effective curve.

        Returns:
            The new curve (also stored as an override)
        """
        path = self._resolve_path(path)
        curve = add_point(self.effective_curve(path))
        self.set_user_setting(path, SettingName.CURVE, curve)
        return curve

    def remove_curve_point(self, index: int, path: Optional[str] = None) -> Curve:
        """
        Remove a point from the option's effective curve.

        Raises:
            CurvePointIndexError: If there is no point at ``index``
        """
        path = self._resolve_path(path)
        curve = self.effective_curve(path) or Curve()
        curve = remove_point(curve, index)
        self.set_user_setting(path, SettingName.CURVE, curve)
        return curve

    def update_curve_point(
        self, index: int, field: PointField, value: float, path: Optional[str] = None
    ) -> Curve:
        """
        Set one coordinate of a point of the option's effective curve.

        Raises:
            CurvePointIndexError: If there is no point at ``index``
        """
        path = self._resolve_path(path)
        curve = self.effective_curve(path) or Curve()
        curve = update_point(curve, index, field, value)
        self.set_user_setting(path, SettingName.CURVE, curve)
        return curve

    def apply_curve_preset(self, name: str | CurvePreset, path: Optional[str] = None) -> Optional[Curve]:
        """
        Replace the option's curve with a preset.

        Unknown preset names are logged and change nothing.

        Returns:
            The curve now in effect
        """
        path = self._resolve_path(path)
        current = self.effective_curve(path)
        curve = apply_preset(name, current)
        if curve is current:
            return current

        self.set_user_setting(path, SettingName.CURVE, curve)
        logger.info(f"Applied curve preset {name} to {path}")
        return curve

    def evaluate(self, value: float, path: Optional[str] = None) -> float:
        """Evaluate the option's effective response at ``value``."""
        path = self._resolve_path(path)
        return evaluate(value, self.effective_curve(path), self.effective_exponent(path))

    def sample_response(self, path: Optional[str] = None, steps: int = 100) -> list[tuple[float, float]]:
        """Sample the option's effective response curve."""
        path = self._resolve_path(path)
        return sample_response(self.effective_curve(path), self.effective_exponent(path), steps)

    # =================================================================
    # Resets
    # =================================================================

    def reset_node_settings(self, path: Optional[str] = None) -> bool:
        """
        Drop every override of one option for the current device/instance.

        Returns:
            True if anything was removed
        """
        path = self._resolve_path(path)
        removed = self._store.reset_path(self._device_type, self.instance, path)
        if removed:
            self._unsaved = True
            self._notify_observers(
                SettingsEvent.OPTION_RESET,
                device_type=self._device_type,
                instance=self.instance,
                path=path,
            )
            logger.info(f"Reset settings of {path}")
        return removed

    def reset_session(self) -> None:
        """Drop every override of every device type and instance."""
        self._store.reset_all()
        self._unsaved = True
        self._notify_observers(SettingsEvent.SESSION_RESET)
        logger.info("Reset all control settings")

    # =================================================================
    # Persistence
    # =================================================================

    def get_control_settings(self) -> ControlSettings:
        """Get a snapshot of every override, for an external save routine."""
        return self._store.snapshot()

    def save(self, path: Path) -> None:
        """
        Save every override to a JSON file.

        Raises:
            OSError: If the file cannot be written
        """
        PydanticPersistence.save_json(self._store.snapshot(), path)
        self._unsaved = False
        self._notify_observers(SettingsEvent.SESSION_SAVED, path=path)
        logger.info(f"Saved control settings to {path}")

    def load(self, path: Path) -> None:
        """
        Replace every override with the contents of a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file has invalid JSON syntax
            ConfigValidationError: If the file has invalid values
        """
        settings = PydanticPersistence.load_json(path, ControlSettings)
        self._store.load(settings)
        self._unsaved = False
        self._notify_observers(SettingsEvent.SESSION_LOADED, path=path)
        logger.info(f"Loaded {settings.count_overrides()} option override(s) from {path}")

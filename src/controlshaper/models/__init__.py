"""Data models for the control response editor."""

from .config import EditorConfig
from .curve import Curve, CurvePoint
from .enums import (
    MAX_JOYSTICK_INSTANCES,
    CurvePreset,
    DeviceType,
    PointField,
    SettingName,
    Visibility,
    VisibilityFlag,
)
from .export import DeviceExport, ExportEntry, format_number
from .option_tree import OptionNode, OptionTree
from .settings import ControlSettings, OptionSettings
from .view import OptionView

__all__ = [
    "MAX_JOYSTICK_INSTANCES",
    "ControlSettings",
    # Models
    "Curve",
    "CurvePoint",
    # Enums
    "CurvePreset",
    "DeviceExport",
    "DeviceType",
    "EditorConfig",
    "ExportEntry",
    "OptionNode",
    "OptionSettings",
    "OptionTree",
    "OptionView",
    "PointField",
    "SettingName",
    "Visibility",
    "VisibilityFlag",
    "format_number",
]

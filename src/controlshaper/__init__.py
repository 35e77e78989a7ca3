"""Controlshaper: option trees, settings overlays and response curves for game controls."""

__version__ = "0.1.0"

from .services import ControlsEditorService, ExportService, SettingsStore

__all__ = [
    "ControlsEditorService",
    "ExportService",
    "SettingsStore",
]

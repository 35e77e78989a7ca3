"""Editing session services: overlay store, session and export."""

from controlshaper.services.editor_service import ControlsEditorService
from controlshaper.services.export_service import ExportService, project
from controlshaper.services.settings_store import SettingsStore

__all__ = [
    "ControlsEditorService",
    "ExportService",
    "SettingsStore",
    "project",
]

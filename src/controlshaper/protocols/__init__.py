"""Protocol definitions for editing session observers."""

from .events import SettingsEvent
from .observers import SettingsObserver

__all__ = ["SettingsEvent", "SettingsObserver"]

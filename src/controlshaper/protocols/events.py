"""Domain events for observer pattern.

Settings events describe changes to an editing session: persistent
overlay mutations and the session's current device/instance selection.
"""

from enum import Enum


class SettingsEvent(Enum):
    """Events emitted by the controls editor session."""

    SETTING_CHANGED = "setting_changed"      # One override written
    OPTION_RESET = "option_reset"            # All overrides of one option removed
    SESSION_RESET = "session_reset"          # Every override removed
    SESSION_LOADED = "session_loaded"        # Overlay replaced from a saved snapshot
    SESSION_SAVED = "session_saved"          # Overlay written to disk
    DEVICE_SWITCHED = "device_switched"      # Current device type changed
    INSTANCE_SWITCHED = "instance_switched"  # Current joystick instance changed

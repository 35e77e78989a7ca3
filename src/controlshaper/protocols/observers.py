"""Observer protocol definitions for editing session events."""

from typing import Protocol, runtime_checkable

from .events import SettingsEvent


@runtime_checkable
class SettingsObserver(Protocol):
    """
    Observer that receives editing session events.

    Lets a rendering layer redraw a settings panel or curve preview when
    the overlay changes, without the session knowing about the UI.
    """

    def on_settings_event(self, event: SettingsEvent, **kwargs) -> None:
        """
        Handle editing session events.

        Args:
            event: The type of settings event
            **kwargs: Event-specific data. SETTING_CHANGED carries
                device_type, instance, path, setting and value;
                OPTION_RESET carries device_type, instance and path;
                DEVICE_SWITCHED and INSTANCE_SWITCHED carry the new
                device_type and instance.

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            session. They do not propagate to the caller.
        """
        ...

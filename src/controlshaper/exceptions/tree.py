"""Option tree exceptions.

Raised while loading option definitions. A single device type failing to
load never prevents the others from loading; see
`controlshaper.tree.loader.load_option_trees`.
"""

from typing import TYPE_CHECKING

from .base import ControlShaperError

if TYPE_CHECKING:
    from controlshaper.models.enums import DeviceType


class OptionTreeError(ControlShaperError):
    """Option tree definitions are invalid or unavailable."""
    pass


class OptionTreeFileError(OptionTreeError):
    """Option tree file does not exist or cannot be read."""

    def __init__(self, file_path: str, original_error: str | None = None):
        """
        Initialize option tree file error.

        Args:
            file_path: Path to the definition file
            original_error: Underlying OS error message, if any
        """
        technical = f"Cannot read option tree file {file_path}"
        if original_error:
            technical += f": {original_error}"

        super().__init__(
            user_message=f"Option definitions could not be read from {file_path}",
            technical_message=technical,
            recoverable=True,
            recovery_hint="Check that the file exists and is readable, or point "
                          "'option_tree_path' in your configuration to a valid file"
        )
        self.file_path = file_path
        self.original_error = original_error


class OptionTreeParseError(OptionTreeError):
    """Option tree file is not well-formed XML."""

    def __init__(self, source: str, parse_error: str):
        """
        Initialize option tree parse error.

        Args:
            source: File path or description of the XML source
            parse_error: The XML parser's error message
        """
        super().__init__(
            user_message="Option definitions have invalid XML syntax",
            technical_message=f"XML parse error in {source}: {parse_error}",
            recoverable=True,
            recovery_hint=f"Check {source} for unclosed tags or stray characters"
        )
        self.source = source
        self.parse_error = parse_error


class MissingOptionTreeError(OptionTreeError):
    """No option tree was loaded for a device type."""

    def __init__(self, device_type: "DeviceType"):
        """
        Initialize missing option tree error.

        Args:
            device_type: The device type without a tree
        """
        super().__init__(
            user_message=f"No control options are available for {device_type.value}",
            technical_message=f"Option tree for device type '{device_type.value}' was not loaded",
            recoverable=True,
            recovery_hint=f"Make sure the definitions file contains an "
                          f"<optiontree type=\"{device_type.value}\"> element"
        )
        self.device_type = device_type

"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from controlshaper.utils.persistence import PydanticPersistence

from .enums import DeviceType

CONFIG_DIR = Path.home() / ".controlshaper"


class EditorConfig(BaseModel):
    """Editor configuration and defaults."""

    # Paths
    option_tree_path: Path | None = Field(
        default=None,
        description="XML file with <optiontree> definitions (None = no definitions)",
    )
    settings_path: Path = Field(
        default_factory=lambda: CONFIG_DIR / "settings.json",
        description="Where the editing session's overrides are saved",
    )

    # Session defaults
    default_device_type: DeviceType = Field(
        default=DeviceType.KEYBOARD, description="Device type selected at startup"
    )

    # Export
    export_curves: bool = Field(
        default=True,
        description="Include exponent and curve overrides in XML exports (False = invert only)",
    )

    @field_serializer("option_tree_path", "settings_path")
    def serialize_path(self, path: Path | None) -> str | None:
        """Serialize Path to string."""
        return str(path) if path is not None else None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "EditorConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.controlshaper/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = CONFIG_DIR / "config.json"

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = CONFIG_DIR / "config.json"

        PydanticPersistence.save_json(self, path)

"""Color picker configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from colorstate.exceptions import handle_errors
from colorstate.model_manager.persistence import PydanticPersistence

from .bounds import ColorBounds
from .enums import ColorMode


def default_config_path() -> Path:
    """Default location of the picker config file."""
    return Path.home() / ".colorstate" / "config.json"


class PickerConfig(BaseModel):
    """Color picker configuration and settings."""

    bounds: ColorBounds = Field(
        default_factory=ColorBounds,
        description="Hue/saturation/value limits applied after every change",
    )
    alpha_enabled: bool = Field(
        default=True,
        description="Whether the picker edits opacity and accepts #AARRGGBB input",
    )
    color_mode: ColorMode = Field(
        default=ColorMode.RGB,
        description="Channel set shown by numeric inputs (rgb or hsv)",
    )

    @classmethod
    @handle_errors(operation_name="load picker config")
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colorstate/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()

        PydanticPersistence.save_json(self, path)

"""Data models for colorstate."""

from .color import Color
from .color_state import ColorState, parse_hex
from .bounds import ColorBounds
from .enums import ColorMode
from .config import PickerConfig, default_config_path

__all__ = [
    "Color",
    "ColorBounds",
    # Enums
    "ColorMode",
    # Models
    "ColorState",
    "PickerConfig",
    "default_config_path",
    "parse_hex",
]

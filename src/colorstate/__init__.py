"""colorstate: RGB/HSV color state for color pickers."""

__version__ = "0.1.0"

from .models import Color, ColorBounds, ColorMode, ColorState, PickerConfig
from .services import ColorPickerService

__all__ = [
    "Color",
    "ColorBounds",
    "ColorMode",
    "ColorPickerService",
    "ColorState",
    "PickerConfig",
]

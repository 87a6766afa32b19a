"""Application services."""

from .picker_service import ColorPickerService

__all__ = [
    "ColorPickerService",
]

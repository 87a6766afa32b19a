"""Color-related exceptions.

This module defines exceptions for color input errors:
- ColorParseError: Base class for text that cannot be read as a color
- HexParseError: Hex string has the wrong length or non-hex characters
- PickerDisposedError: A disposed picker service was asked to change state
"""

from .base import ColorStateError


class ColorParseError(ColorStateError):
    """Text could not be parsed into a color."""
    pass


class HexParseError(ColorParseError):
    """Hex color string is malformed."""

    def __init__(self, text: str, reason: str):
        """
        Initialize hex parse error.

        Args:
            text: The rejected input text
            reason: Why the text was rejected
        """
        super().__init__(
            user_message=f"Invalid hex color '{text}': {reason}",
            technical_message=f"Hex parse failed for {text!r}: {reason}",
            recoverable=True,
            recovery_hint="Use #RRGGBB or #AARRGGBB, e.g. #FF0000 or #80FF0000",
        )
        self.text = text
        self.reason = reason


class PickerDisposedError(ColorStateError):
    """Picker service was used after dispose()."""

    def __init__(self, operation: str):
        super().__init__(
            user_message="Color picker has already been disposed",
            technical_message=f"Attempted to {operation} on a disposed ColorPickerService",
            recoverable=False,
        )
        self.operation = operation

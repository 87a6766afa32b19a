"""Errors raised while loading or changing the picker configuration.

- ConfigurationError: base class
- ConfigFileInvalidError: the file is not readable JSON
- ConfigValidationError: the JSON parsed but a value is out of range
- ConfigWriteError: the file could not be written
"""

from typing import Any

from .base import ColorStateError

# Extra hint lines keyed by a substring of the failing field path
_FIELD_HINTS = (
    ("hue", "Hue bounds must be whole degrees between 0 and 359"),
    ("saturation", "Saturation and value bounds must be between 0 and 100"),
    ("value", "Saturation and value bounds must be between 0 and 100"),
    ("color_mode", "Valid color modes: rgb, hsv"),
    ("alpha_enabled", "alpha_enabled must be true or false"),
)


class ConfigurationError(ColorStateError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file could not be parsed as JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: The offending config file
            parse_error: Parser (or I/O) message describing the problem
        """
        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the comma after the last entry in {file_path}; "
                "JSON does not allow trailing commas"
            )
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = (
                f"Fix the JSON in {file_path}, or run 'colorstate config reset' "
                "to start again from defaults"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A configuration value is out of range or of the wrong type."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Dotted path of the failing field, e.g. ``bounds.max_hue``
            value: The rejected value
            error_msg: Why it was rejected
            file_path: Config file the value came from, if any
        """
        hint_lines = [f"Update the '{field}' value in your configuration"]
        if file_path:
            hint_lines.append(f"Config file: {file_path}")
        hint_lines.extend(hint for key, hint in _FIELD_HINTS if key in field.lower())

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(dict.fromkeys(hint_lines))
        )
        self.field = field
        self.value = value
        self.file_path = file_path


class ConfigWriteError(ConfigurationError):
    """Configuration file could not be written."""

    def __init__(self, file_path: str, reason: str):
        """
        Args:
            file_path: Config file that was being written
            reason: I/O error message
        """
        super().__init__(
            user_message="Cannot write configuration file",
            technical_message=f"Cannot write {file_path}: {reason}",
            recoverable=True,
            recovery_hint=(
                f"Check that the directory for {file_path} exists and is writable, "
                "or pass a different file with --config"
            )
        )
        self.file_path = file_path
        self.reason = reason

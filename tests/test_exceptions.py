"""Tests for the exception hierarchy and error handling helpers."""

import pytest
from pydantic import ValidationError

from colorstate.exceptions import (
    ColorParseError,
    ColorStateError,
    ConfigFileInvalidError,
    ConfigValidationError,
    ErrorContext,
    HexParseError,
    PickerDisposedError,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)
from colorstate.models import ColorState, PickerConfig


class TestColorErrors:
    """Test color exceptions."""

    @pytest.mark.unit
    def test_hex_parse_error(self):
        """Test HexParseError messages and attributes."""
        error = HexParseError("#12", "expected 6 or 8 hex digits, got 2")

        assert isinstance(error, ColorParseError)
        assert isinstance(error, ColorStateError)
        assert error.text == "#12"
        assert error.recoverable is True
        assert str(error) == error.user_message
        assert "#12" in error.user_message
        assert "#RRGGBB" in error.recovery_hint

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        """Test get_full_message appends the recovery hint."""
        error = HexParseError("nope", "not hex")
        assert error.get_full_message().endswith(f"Suggestion: {error.recovery_hint}")

    @pytest.mark.unit
    def test_disposed_error(self):
        """Test PickerDisposedError."""
        error = PickerDisposedError("edit the color")
        assert error.recoverable is False
        assert error.recovery_hint is None
        assert "edit the color" in error.technical_message


class TestConfigErrors:
    """Test configuration exceptions."""

    @pytest.mark.unit
    def test_trailing_comma_hint(self):
        """Test that trailing commas get a specific message."""
        error = ConfigFileInvalidError("config.json", "Trailing comma at line 3")
        assert "trailing comma" in error.user_message
        assert "config.json" in error.recovery_hint

    @pytest.mark.unit
    def test_generic_syntax_error(self):
        """Test the generic invalid syntax message."""
        error = ConfigFileInvalidError("config.json", "EOF while parsing")
        assert error.user_message == "Configuration file has invalid syntax"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field, hint",
        [
            ("bounds.max_hue", "0 and 359"),
            ("bounds.min_saturation", "0 and 100"),
            ("color_mode", "rgb, hsv"),
        ],
    )
    def test_validation_hints(self, field, hint):
        """Test field-specific recovery hints."""
        error = ConfigValidationError(field, "x", "bad value", file_path="c.json")
        assert hint in error.recovery_hint
        assert "c.json" in error.recovery_hint


class TestWrapPydanticError:
    """Test wrap_pydantic_error."""

    @pytest.mark.unit
    def test_single_field(self):
        """Test a single nested validation error."""
        with pytest.raises(ValidationError) as exc_info:
            PickerConfig.model_validate({"bounds": {"max_hue": 400}})

        error = wrap_pydantic_error(exc_info.value, "config.json")

        assert isinstance(error, ConfigValidationError)
        assert error.field == "bounds.max_hue"
        assert error.value == 400

    @pytest.mark.unit
    def test_invalid_json(self):
        """Test that JSON syntax errors become ConfigFileInvalidError."""
        with pytest.raises(ValidationError) as exc_info:
            PickerConfig.model_validate_json("{not json")

        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigFileInvalidError)

    @pytest.mark.unit
    def test_model_level_error(self):
        """Test a validator error on the bounds model."""
        with pytest.raises(ValidationError) as exc_info:
            PickerConfig.model_validate({"bounds": {"min_value": 90, "max_value": 10}})

        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert error.field == "bounds"
        assert "min_value" in error.user_message


class TestHandlers:
    """Test error handling helpers."""

    @pytest.mark.unit
    def test_handle_errors_fallback(self):
        """Test that handle_errors can notify and return a fallback."""
        messages = []

        @handle_errors(operation_name="parse hex", user_notification=messages.append,
                       fallback_value=None, re_raise=False)
        def parse(text):
            return ColorState.from_hex(text)

        assert parse("#zz0000") is None
        assert len(messages) == 1
        assert "Suggestion:" in messages[0]
        assert parse("#00FF00").hue == 120.0

    @pytest.mark.unit
    def test_handle_errors_re_raise(self):
        """Test that handle_errors re-raises by default."""

        @handle_errors(operation_name="parse hex")
        def parse(text):
            return ColorState.from_hex(text)

        with pytest.raises(HexParseError):
            parse("#12")

    @pytest.mark.unit
    def test_error_context_suppresses(self):
        """Test ErrorContext with re_raise=False."""
        with ErrorContext("parse hex", re_raise=False) as ctx:
            ColorState.from_hex("bad")

        assert isinstance(ctx.error, HexParseError)

    @pytest.mark.unit
    def test_error_context_re_raises(self):
        """Test ErrorContext re-raises by default."""
        with pytest.raises(ValueError):
            with ErrorContext("compute"):
                raise ValueError("boom")

    @pytest.mark.unit
    def test_format_error_for_display(self):
        """Test formatting app and foreign errors."""
        error = HexParseError("#1", "too short")
        assert format_error_for_display(error) == (error.user_message, error.recovery_hint)
        assert format_error_for_display(ValueError("boom")) == ("ValueError: boom", None)


class TestErrorCollector:
    """Test ErrorCollector."""

    @pytest.mark.unit
    def test_collects_color_errors(self):
        """Test that failures are collected and successes counted."""
        collector = collect_errors("inspect colors")
        states = []

        for text in ["#FF0000", "#GG0000", "#0000FF", "#1"]:
            with collector.try_operation(f"parse {text}"):
                states.append(ColorState.from_hex(text))

        assert len(states) == 2
        assert collector.success_count == 2
        assert collector.error_count == 2
        summary = collector.get_summary()
        assert summary.startswith("Failed 2 of 4 operations:")
        assert "parse #GG0000" in summary

    @pytest.mark.unit
    def test_other_errors_propagate(self):
        """Test that non-application errors are not collected."""
        collector = collect_errors("batch")

        with pytest.raises(KeyError):
            with collector.try_operation("lookup"):
                raise KeyError("missing")

        assert not collector.has_errors

    @pytest.mark.unit
    def test_summary_without_errors(self):
        """Test the summary when everything succeeded."""
        collector = collect_errors("batch")
        with collector.try_operation("noop"):
            pass
        assert collector.get_summary() == "All operations completed successfully (1 total)"

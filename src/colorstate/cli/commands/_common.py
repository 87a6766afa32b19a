"""Helpers shared by CLI commands."""

import logging

import click

from colorstate.exceptions import ConfigurationError, ErrorContext, format_error_for_display
from colorstate.models import ColorState, PickerConfig

logger = logging.getLogger(__name__)


def fail(ctx: click.Context, error: Exception) -> None:
    """Print an error with its recovery hint and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)
    ctx.exit(1)


def load_config(ctx: click.Context) -> PickerConfig:
    """Load the picker config named on the command line, or defaults."""
    try:
        return PickerConfig.load_or_default(ctx.obj["config_path"])
    except ConfigurationError as e:
        fail(ctx, e)


def save_config(ctx: click.Context, picker_config: PickerConfig) -> None:
    """Write the picker config to the file named on the command line."""
    path = ctx.obj["config_path"]
    try:
        with ErrorContext(f"save picker config to {path}", logger):
            picker_config.save(path)
    except ConfigurationError as e:
        fail(ctx, e)


def echo_state(state: ColorState, include_alpha: bool = True) -> None:
    """Print a color state as hex, 8-bit RGB, HSV and name."""
    color = state.to_color()
    color_name = state.guess_color_name()

    click.echo(state.to_hex_string(include_alpha))
    click.echo(f"  RGB:   {color.r}, {color.g}, {color.b}")
    click.echo(f"  Alpha: {color.a} ({state.alpha * 100:.1f}%)")
    click.echo(
        f"  HSV:   {state.hue:.1f}°, {state.saturation * 100:.1f}%, {state.value * 100:.1f}%"
    )
    click.echo(f"  Name:  {color_name or '-'}")

"""Color command implementations."""

from typing import Optional

import click
from pydantic import ValidationError

from colorstate.exceptions import ColorStateError, collect_errors
from colorstate.models import Color, ColorBounds, ColorState

from ._common import echo_state, fail, load_config


@click.command()
@click.argument("hex_values", nargs=-1, required=True)
@click.pass_context
def inspect(ctx, hex_values: tuple[str, ...]):
    """Show RGB, HSV and name for one or more hex colors."""
    collector = collect_errors("inspect colors")

    for text in hex_values:
        with collector.try_operation(f"parse {text}"):
            state = ColorState.from_hex(text)
            echo_state(state, include_alpha=len(text.lstrip("#")) == 8)
            click.echo()

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        ctx.exit(1)


@click.command(name="from-rgb")
@click.argument("red", type=click.IntRange(0, 255))
@click.argument("green", type=click.IntRange(0, 255))
@click.argument("blue", type=click.IntRange(0, 255))
@click.option("--alpha", "-a", type=click.IntRange(0, 255), default=255, show_default=True,
              help="Opacity (0-255)")
def from_rgb(red: int, green: int, blue: int, alpha: int):
    """Build a color from 8-bit RGB channels."""
    state = ColorState.from_color(Color(r=red, g=green, b=blue, a=alpha))
    echo_state(state)


@click.command(name="from-hsv")
@click.argument("hue", type=click.FloatRange(0, 360))
@click.argument("saturation", type=click.FloatRange(0, 100))
@click.argument("value", type=click.FloatRange(0, 100))
@click.option("--alpha", "-a", type=click.FloatRange(0, 100), default=100.0, show_default=True,
              help="Opacity (percent)")
def from_hsv(hue: float, saturation: float, value: float, alpha: float):
    """Build a color from hue (degrees), saturation and value (percent)."""
    state = ColorState.from_hsv(hue, saturation / 100, value / 100, alpha / 100)
    echo_state(state)


@click.command()
@click.argument("hex_value")
@click.option("--min-hue", type=int, default=None, help="Minimum hue (0-359)")
@click.option("--max-hue", type=int, default=None, help="Maximum hue (0-359)")
@click.option("--min-saturation", type=int, default=None, help="Minimum saturation (0-100)")
@click.option("--max-saturation", type=int, default=None, help="Maximum saturation (0-100)")
@click.option("--min-value", type=int, default=None, help="Minimum value (0-100)")
@click.option("--max-value", type=int, default=None, help="Maximum value (0-100)")
@click.pass_context
def clamp(
    ctx,
    hex_value: str,
    min_hue: Optional[int],
    max_hue: Optional[int],
    min_saturation: Optional[int],
    max_saturation: Optional[int],
    min_value: Optional[int],
    max_value: Optional[int],
):
    """
    Clamp a hex color into HSV bounds.

    Bounds not given on the command line come from the picker config.
    """
    overrides = {
        "min_hue": min_hue,
        "max_hue": max_hue,
        "min_saturation": min_saturation,
        "max_saturation": max_saturation,
        "min_value": min_value,
        "max_value": max_value,
    }
    config = load_config(ctx)

    try:
        bounds = ColorBounds.model_validate(
            config.bounds.model_dump() | {k: v for k, v in overrides.items() if v is not None}
        )
    except ValidationError as e:
        raise click.UsageError(f"Invalid bounds: {e.errors()[0]['msg']}") from e

    try:
        state = ColorState.from_hex(hex_value)
    except ColorStateError as e:
        fail(ctx, e)

    clamped = bounds.clamp(state)
    echo_state(clamped, include_alpha=len(hex_value.lstrip("#")) == 8)
    if clamped is state:
        click.echo("  (already within bounds)")


@click.command()
@click.argument("hex_value")
@click.pass_context
def name(ctx, hex_value: str):
    """Print the nearest named color, if any is close."""
    try:
        state = ColorState.from_hex(hex_value)
    except ColorStateError as e:
        fail(ctx, e)

    color_name = state.guess_color_name()
    if color_name:
        click.echo(color_name)
    else:
        click.echo("(no close match)")

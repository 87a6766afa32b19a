"""
Picker configuration commands.

Commands:
    - config show [--field FIELD]     # Display configuration
    - config set --option VALUE ...   # Update configuration
    - config validate                 # Validate config file
    - config reset                    # Reset to defaults
"""

import json
import logging
from typing import Optional

import click
from pydantic import ValidationError

from colorstate.exceptions import wrap_pydantic_error
from colorstate.model_manager import PydanticPersistence
from colorstate.models import ColorMode, PickerConfig

from ._common import fail, load_config, save_config

logger = logging.getLogger(__name__)


@click.group(name="config")
def config():
    """Configure color picker defaults."""
    pass


@config.command(name="show")
@click.option("--field", "-f", default=None,
              help="Show a single field (e.g. alpha_enabled or bounds.max_hue)")
@click.pass_context
def show_config(ctx, field: Optional[str]):
    """Display the current configuration."""
    picker_config = load_config(ctx)
    data = picker_config.model_dump(mode="json")

    if field is None:
        click.echo(f"Config file: {ctx.obj['config_path']}")
        click.echo(json.dumps(data, indent=2))
        return

    value = data
    for part in field.split("."):
        if not isinstance(value, dict) or part not in value:
            raise click.BadParameter(f"Unknown field '{field}'", param_hint="--field")
        value = value[part]
    click.echo(f"{field}: {json.dumps(value)}")


@config.command(name="set")
@click.option("--min-hue", type=int, default=None, help="Minimum hue (0-359)")
@click.option("--max-hue", type=int, default=None, help="Maximum hue (0-359)")
@click.option("--min-saturation", type=int, default=None, help="Minimum saturation (0-100)")
@click.option("--max-saturation", type=int, default=None, help="Maximum saturation (0-100)")
@click.option("--min-value", type=int, default=None, help="Minimum value (0-100)")
@click.option("--max-value", type=int, default=None, help="Maximum value (0-100)")
@click.option("--alpha/--no-alpha", "alpha_enabled", default=None,
              help="Enable or disable the alpha channel")
@click.option("--mode", "color_mode",
              type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
              default=None, help="Numeric input mode")
@click.pass_context
def set_config(ctx, alpha_enabled: Optional[bool], color_mode: Optional[str], **bound_values):
    """Update configuration values."""
    path = ctx.obj["config_path"]
    picker_config = load_config(ctx)

    data = picker_config.model_dump(mode="json")
    bound_updates = {k: v for k, v in bound_values.items() if v is not None}
    data["bounds"].update(bound_updates)
    if alpha_enabled is not None:
        data["alpha_enabled"] = alpha_enabled
    if color_mode is not None:
        data["color_mode"] = color_mode.lower()

    if not bound_updates and alpha_enabled is None and color_mode is None:
        click.echo("Nothing to update. Run 'colorstate config set --help' for options.")
        return

    try:
        updated = PickerConfig.model_validate(data)
    except ValidationError as e:
        fail(ctx, wrap_pydantic_error(e, str(path)))

    save_config(ctx, updated)
    logger.info(f"Saved picker config to {path}")
    click.echo(f"Configuration saved to {path}")


@config.command(name="validate")
@click.pass_context
def validate_config(ctx):
    """Validate the configuration file."""
    path = ctx.obj["config_path"]
    is_valid, error = PydanticPersistence.validate_json(path, PickerConfig)

    if is_valid:
        click.echo(f"Configuration is valid: {path}")
    else:
        click.echo(f"Configuration is invalid: {error}", err=True)
        ctx.exit(1)


@config.command(name="reset")
@click.confirmation_option(prompt="Reset picker configuration to defaults?")
@click.pass_context
def reset_config(ctx):
    """Reset configuration to defaults."""
    path = ctx.obj["config_path"]
    save_config(ctx, PickerConfig())
    click.echo(f"Configuration reset: {path}")

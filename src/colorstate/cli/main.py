"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from colorstate import __version__
from colorstate.models import default_config_path

from .commands import clamp, config, from_hsv, from_rgb, inspect, name

logger = logging.getLogger(__name__)

# Handlers installed by setup_logging, removed again on the next call
_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # Console output stays on stderr so stdout carries only command results
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)

    log_path: Optional[Path] = None
    if log_file:
        log_path = log_file
        level = min(level, getattr(logging, log_level.upper()))
    elif debug:
        log_path = Path.cwd() / "colorstate-debug.log"

    if log_path is not None:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(logging.DEBUG if debug else getattr(logging, log_level.upper()))
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)

    root_logger.setLevel(level)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.version_option(version=__version__, prog_name="colorstate")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Picker config file (default: ~/.colorstate/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./colorstate-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.pass_context
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    colorstate - RGB/HSV color state for color pickers.

    Parse, convert, clamp and name colors the way a color picker does.

    \b
    Examples:
      # Show RGB, HSV and name for colors
      colorstate inspect '#FF0000' '#80FF8000'

      # Build a color from channels
      colorstate from-rgb 255 128 0
      colorstate from-hsv 200 50 75 --alpha 80

      # Keep a color inside picker bounds
      colorstate clamp '#0000FF' --min-hue 10 --max-hue 20

      # Configure default bounds
      colorstate config set --max-saturation 80
    """
    setup_logging(verbose, debug, log_file, log_level)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or default_config_path()


cli.add_command(inspect)
cli.add_command(from_rgb)
cli.add_command(from_hsv)
cli.add_command(clamp)
cli.add_command(name)
cli.add_command(config)

if __name__ == "__main__":
    cli()

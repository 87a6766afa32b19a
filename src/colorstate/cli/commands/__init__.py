"""CLI commands for colorstate."""

from .color import clamp, from_hsv, from_rgb, inspect, name
from .config import config

__all__ = ["clamp", "config", "from_hsv", "from_rgb", "inspect", "name"]

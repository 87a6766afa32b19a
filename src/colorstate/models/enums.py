"""Enumerations for colorstate."""

from enum import Enum


class ColorMode(str, Enum):
    """Channel set shown by a picker's numeric inputs."""

    RGB = "rgb"  # Red, green, blue (0-255)
    HSV = "hsv"  # Hue (degrees), saturation and value (percent)

"""RGB ⇄ HSV conversion and channel quantization.

All functions are pure and operate on normalized fractions:

- red, green, blue, saturation, value: 0.0 - 1.0
- hue: degrees, 0.0 <= hue < 360.0

Achromatic colors (gray, black, white) have no defined hue. Rather than
resetting to 0, ``rgb_to_hsv`` hands back the caller's previous hue so that
a hue control does not jump when the user desaturates a color.

Example:
    >>> rgb_to_hsv(1.0, 0.0, 0.0)
    (0.0, 1.0, 1.0)
    >>> rgb_to_hsv(0.5, 0.5, 0.5, previous_hue=200.0)
    (200.0, 0.0, 0.5)
    >>> hsv_to_rgb(120.0, 1.0, 0.5)
    (0.0, 0.5, 0.0)
"""

import math

HUE_RANGE = 360.0
BYTE_MAX = 255


def clamp_unit(x: float) -> float:
    """Clamp a fraction to 0.0 - 1.0."""
    return min(max(x, 0.0), 1.0)


def clamp_hue(h: float) -> float:
    """Clamp hue to 0 - 360 degrees, folding 360 onto 0 (same color)."""
    return min(max(h, 0.0), HUE_RANGE) % HUE_RANGE


def to_byte(x: float) -> int:
    """Quantize a fraction to 0-255, rounding half up (0.5 -> 128)."""
    return int(math.floor(clamp_unit(x) * BYTE_MAX + 0.5))


def from_byte(n: int) -> float:
    """Expand an 8-bit channel (0-255) to a fraction."""
    return n / BYTE_MAX


def rgb_to_hsv(
    r: float, g: float, b: float, previous_hue: float = 0.0
) -> tuple[float, float, float]:
    """
    Convert RGB fractions to HSV.

    Args:
        r: Red (0.0-1.0)
        g: Green (0.0-1.0)
        b: Blue (0.0-1.0)
        previous_hue: Hue to keep when the color is achromatic

    Returns:
        tuple[float, float, float]: (hue in degrees, saturation, value)
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    v = max_c

    if max_c == 0.0 or delta == 0.0:
        return previous_hue, 0.0, v

    s = delta / max_c

    if max_c == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif max_c == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)

    return h % HUE_RANGE, s, v


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB fractions using the sector / fractional-part method.

    Args:
        h: Hue in degrees (wrapped into 0-360)
        s: Saturation (0.0-1.0)
        v: Value (0.0-1.0)

    Returns:
        tuple[float, float, float]: (red, green, blue)
    """
    if s == 0.0:
        return v, v, v

    sector_pos = (h % HUE_RANGE) / 60.0
    sector = int(sector_pos)
    f = sector_pos - sector

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if sector == 0:
        rgb = (v, t, p)
    elif sector == 1:
        rgb = (q, v, p)
    elif sector == 2:
        rgb = (p, v, t)
    elif sector == 3:
        rgb = (p, q, v)
    elif sector == 4:
        rgb = (t, p, v)
    else:
        rgb = (v, p, q)

    return clamp_unit(rgb[0]), clamp_unit(rgb[1]), clamp_unit(rgb[2])

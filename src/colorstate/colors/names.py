"""Nearest-name lookup over the named color palette."""

from functools import lru_cache

from colorstate.models.color import Color

from .palette import NAMED_COLORS

# Farthest a color may sit (Euclidean, 8-bit RGB) from a palette entry and
# still be called by its name. The full cube diagonal is ~441.7.
NAME_MATCH_THRESHOLD = 64.0

_ALL_NAMED_COLORS: list[tuple[str, tuple[int, int, int]]] = [
    (name, color.to_rgb_tuple()) for name, color in NAMED_COLORS.items()
]


@lru_cache(maxsize=1024)
def _nearest_name(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    min_distance = float("inf")
    closest_name = ""

    for name, (pr, pg, pb) in _ALL_NAMED_COLORS:
        distance = ((r - pr) ** 2 + (g - pg) ** 2 + (b - pb) ** 2) ** 0.5

        # Strict comparison keeps the first entry on ties
        if distance < min_distance:
            min_distance = distance
            closest_name = name

    if min_distance > NAME_MATCH_THRESHOLD:
        return ""
    return closest_name


def guess_color_name(color: Color) -> str:
    """
    Find the palette name closest to a color.

    Uses Euclidean distance in 8-bit RGB space. Alpha is ignored.

    Args:
        color: The color to name

    Returns:
        The nearest palette name, or "" if nothing is within
        NAME_MATCH_THRESHOLD

    Example:
        >>> guess_color_name(Color(r=250, g=5, b=5))
        'Red'
    """
    return _nearest_name(color.to_rgb_tuple())


def get_cache_stats():
    """Return lru_cache statistics for name lookup."""
    return _nearest_name.cache_info()

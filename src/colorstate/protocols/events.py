"""Domain events for observer pattern.

Events emitted by a color picker service:
- Color events: the published color changed, or an edit was rejected
"""

from enum import Enum


class ColorEvent(Enum):
    """Events from a color picker service."""

    COLOR_CHANGED = "color_changed"  # A new clamped state was published
    HEX_REJECTED = "hex_rejected"    # Submitted hex text was invalid; state kept
    MODE_CHANGED = "mode_changed"    # Numeric input mode switched (rgb/hsv)

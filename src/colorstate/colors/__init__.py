"""Color math and named colors.

## Two Color Representations

### 1. Normalized fractions (0.0-1.0)
**Purpose**: Working representation inside ColorState
**Format**: red/green/blue/alpha/saturation/value fractions, hue in degrees

### 2. Standard 8-bit RGBA (0-255)
**Purpose**: Exchange with the rendering layer
**Format**: `Color(r=255, g=128, b=0, a=255)`

Conversion between the two is lossy by at most 1/255 per channel:
fractions are quantized with round-half-up (`to_byte`) and expanded with
`from_byte`.

## Usage

```python
from colorstate.colors import COLORS, guess_color_name, rgb_to_hsv

h, s, v = rgb_to_hsv(1.0, 0.5, 0.0)   # (30.0, 1.0, 1.0)
guess_color_name(COLORS.ORANGE)        # 'Orange'
```

## See Also

- `models.ColorState`: the dual-representation value built on these helpers
"""

from .conversions import clamp_hue, clamp_unit, from_byte, hsv_to_rgb, rgb_to_hsv, to_byte
from .names import NAME_MATCH_THRESHOLD, get_cache_stats, guess_color_name
from .palette import COLORS, NAMED_COLORS

__all__ = [
    "COLORS",
    "NAMED_COLORS",
    "NAME_MATCH_THRESHOLD",
    "clamp_hue",
    "clamp_unit",
    "from_byte",
    "get_cache_stats",
    "guess_color_name",
    "hsv_to_rgb",
    "rgb_to_hsv",
    "to_byte",
]

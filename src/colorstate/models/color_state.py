"""Dual-representation color state for color pickers.

A ColorState carries one color in two coordinate systems at once - RGB and
HSV - plus an orthogonal alpha channel. It is immutable: every edit returns
a new state, and the triple that was not edited is always re-derived from
the one that was, so the two can never drift apart.

Authority rules for ``copy_with``:

- red/green/blue edits are authoritative over RGB; HSV is re-derived
- hue/saturation/value edits are authoritative over HSV; RGB is re-derived
- alpha edits touch nothing else

Example:
    ```python
    state = ColorState.from_color(Color(r=255, g=0, b=0))
    darker = state.copy_with(value=0.5)       # RGB becomes (0.5, 0, 0)
    bounded = darker.clamp_to_bounds(min_hue=10, max_hue=20)
    bounded.to_hex_string(include_alpha=True) # '#FF801500'
    ```
"""

import logging
import string

from pydantic import BaseModel, ConfigDict, Field

from colorstate.colors.conversions import (
    clamp_hue,
    clamp_unit,
    from_byte,
    hsv_to_rgb as _hsv_to_rgb,
    rgb_to_hsv as _rgb_to_hsv,
    to_byte,
)
from colorstate.colors.names import guess_color_name as _guess_color_name
from colorstate.exceptions import HexParseError
from colorstate.models.color import Color

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex(text: str) -> tuple[int | None, int, int, int]:
    """
    Parse '#RRGGBB' or '#AARRGGBB' into channel bytes.

    The leading '#' is optional. Digits are read big-endian; with eight
    digits the first byte is alpha.

    Args:
        text: Hex string to parse

    Returns:
        (alpha or None, red, green, blue), each 0-255

    Raises:
        HexParseError: If the digit count is not 6 or 8, or a character
            is not a hex digit
    """
    digits = text[1:] if text.startswith("#") else text

    if len(digits) not in (6, 8):
        raise HexParseError(text, f"expected 6 or 8 hex digits, got {len(digits)}")

    # int(x, 16) also accepts '_', signs and whitespace
    if not all(c in _HEX_DIGITS for c in digits):
        raise HexParseError(text, "contains non-hex characters")

    packed = int(digits, 16)
    alpha = (packed >> 24) & 0xFF if len(digits) == 8 else None
    return alpha, (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


class ColorState(BaseModel):
    """A color held simultaneously as RGB and HSV, plus alpha.

    All channels are fractions in 0.0-1.0 except hue, which is in degrees
    (0.0 <= hue < 360.0). Direct construction trusts the caller to pass a
    consistent RGB/HSV pair; prefer the ``from_*`` constructors.
    """

    model_config = ConfigDict(frozen=True)

    red: float = Field(ge=0.0, le=1.0, description="Red (0.0-1.0)")
    green: float = Field(ge=0.0, le=1.0, description="Green (0.0-1.0)")
    blue: float = Field(ge=0.0, le=1.0, description="Blue (0.0-1.0)")
    alpha: float = Field(ge=0.0, le=1.0, description="Opacity (0.0-1.0)")
    hue: float = Field(ge=0.0, lt=360.0, description="Hue in degrees (0.0-360.0)")
    saturation: float = Field(ge=0.0, le=1.0, description="Saturation (0.0-1.0)")
    value: float = Field(ge=0.0, le=1.0, description="Value / brightness (0.0-1.0)")

    # =================================================================
    # Construction
    # =================================================================

    @classmethod
    def from_color(cls, color: Color) -> "ColorState":
        """Create a state from an 8-bit RGBA color. Never fails."""
        return cls.from_rgb(
            from_byte(color.r),
            from_byte(color.g),
            from_byte(color.b),
            from_byte(color.a),
        )

    @classmethod
    def from_rgb(
        cls,
        red: float,
        green: float,
        blue: float,
        alpha: float = 1.0,
        previous_hue: float = 0.0,
    ) -> "ColorState":
        """
        Create a state from RGB fractions, deriving HSV.

        Out-of-range inputs are clamped to 0.0-1.0.

        Args:
            red: Red (0.0-1.0)
            green: Green (0.0-1.0)
            blue: Blue (0.0-1.0)
            alpha: Opacity (0.0-1.0)
            previous_hue: Hue to keep if the color is achromatic
        """
        r, g, b = clamp_unit(red), clamp_unit(green), clamp_unit(blue)
        h, s, v = _rgb_to_hsv(r, g, b, clamp_hue(previous_hue))
        return cls(red=r, green=g, blue=b, alpha=clamp_unit(alpha), hue=h, saturation=s, value=v)

    @classmethod
    def from_hsv(
        cls, hue: float, saturation: float, value: float, alpha: float = 1.0
    ) -> "ColorState":
        """Create a state from HSV, deriving RGB. Inputs are clamped."""
        h, s, v = clamp_hue(hue), clamp_unit(saturation), clamp_unit(value)
        r, g, b = _hsv_to_rgb(h, s, v)
        return cls(red=r, green=g, blue=b, alpha=clamp_unit(alpha), hue=h, saturation=s, value=v)

    @classmethod
    def from_hex(cls, text: str, alpha: float = 1.0) -> "ColorState":
        """
        Create a state from a hex string.

        Args:
            text: '#RRGGBB' or '#AARRGGBB' ('#' optional)
            alpha: Opacity to use when the string carries no alpha byte

        Raises:
            HexParseError: If the text is not valid hex
        """
        a, r, g, b = parse_hex(text)
        return cls.from_rgb(
            from_byte(r),
            from_byte(g),
            from_byte(b),
            from_byte(a) if a is not None else alpha,
        )

    @staticmethod
    def rgb_to_hsv(
        r: float, g: float, b: float, previous_hue: float = 0.0
    ) -> tuple[float, float, float]:
        """See colorstate.colors.conversions.rgb_to_hsv."""
        return _rgb_to_hsv(r, g, b, previous_hue)

    @staticmethod
    def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
        """See colorstate.colors.conversions.hsv_to_rgb."""
        return _hsv_to_rgb(h, s, v)

    # =================================================================
    # Edits (each returns a new state)
    # =================================================================

    def copy_with(
        self,
        *,
        red: float | None = None,
        green: float | None = None,
        blue: float | None = None,
        alpha: float | None = None,
        hue: float | None = None,
        saturation: float | None = None,
        value: float | None = None,
    ) -> "ColorState":
        """
        Return a new state with some fields replaced.

        The other representation is re-derived from the edited one.
        Inputs are clamped to their ranges; hue 360 folds onto 0.

        Raises:
            ValueError: If RGB and HSV fields are edited together, since
                it is then unclear which triple is authoritative
        """
        rgb_edit = red is not None or green is not None or blue is not None
        hsv_edit = hue is not None or saturation is not None or value is not None

        if rgb_edit and hsv_edit:
            raise ValueError("Cannot edit RGB and HSV fields in the same copy_with call")

        new_alpha = clamp_unit(alpha) if alpha is not None else self.alpha

        if rgb_edit:
            return ColorState.from_rgb(
                red if red is not None else self.red,
                green if green is not None else self.green,
                blue if blue is not None else self.blue,
                new_alpha,
                previous_hue=self.hue,
            )

        if hsv_edit:
            return ColorState.from_hsv(
                hue if hue is not None else self.hue,
                saturation if saturation is not None else self.saturation,
                value if value is not None else self.value,
                new_alpha,
            )

        return self.model_copy(update={"alpha": new_alpha})

    def clamp_to_bounds(
        self,
        min_hue: int = 0,
        max_hue: int = 359,
        min_saturation: int = 0,
        max_saturation: int = 100,
        min_value: int = 0,
        max_value: int = 100,
    ) -> "ColorState":
        """
        Constrain hue, saturation and value to inclusive bounds.

        Saturation and value bounds are percentages (0-100). When any
        component moves, RGB is re-derived from the clamped HSV; a state
        already inside the bounds is returned as-is. Clamping twice with
        the same bounds gives the same result as clamping once.

        Raises:
            ValueError: If a minimum exceeds its maximum
        """
        if min_hue > max_hue or min_saturation > max_saturation or min_value > max_value:
            raise ValueError(
                f"Invalid bounds: hue {min_hue}-{max_hue}, "
                f"saturation {min_saturation}-{max_saturation}, value {min_value}-{max_value}"
            )

        h = min(max(self.hue, float(min_hue)), float(max_hue))
        s = _clamp_percent(self.saturation, min_saturation, max_saturation)
        v = _clamp_percent(self.value, min_value, max_value)

        if (h, s, v) == (self.hue, self.saturation, self.value):
            return self

        logger.debug(
            f"Clamped HSV ({self.hue:.2f}, {self.saturation:.3f}, {self.value:.3f}) "
            f"-> ({h:.2f}, {s:.3f}, {v:.3f})"
        )
        return ColorState.from_hsv(h, s, v, self.alpha)

    def with_hex(self, text: str) -> "ColorState":
        """
        Return a new state parsed from a hex string.

        Eight digits set alpha from the first byte; six digits keep this
        state's alpha. Hue is retained if the parsed color is achromatic.
        This state is never changed.

        Raises:
            HexParseError: If the text is not valid hex
        """
        a, r, g, b = parse_hex(text)
        return ColorState.from_rgb(
            from_byte(r),
            from_byte(g),
            from_byte(b),
            from_byte(a) if a is not None else self.alpha,
            previous_hue=self.hue,
        )

    # =================================================================
    # Projections
    # =================================================================

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    @property
    def hsv(self) -> tuple[float, float, float]:
        return (self.hue, self.saturation, self.value)

    def to_color(self) -> Color:
        """Quantize to 8-bit RGBA, rounding half up."""
        return Color(
            r=to_byte(self.red),
            g=to_byte(self.green),
            b=to_byte(self.blue),
            a=to_byte(self.alpha),
        )

    def to_hex_string(self, include_alpha: bool = False) -> str:
        """Format as '#RRGGBB' or '#AARRGGBB' (uppercase)."""
        return self.to_color().to_hex(include_alpha)

    def guess_color_name(self) -> str:
        """Nearest palette color name, or "" if none is close."""
        return _guess_color_name(self.to_color())

    def dispose(self) -> None:
        """Release held resources. A plain value holds none."""


def _clamp_percent(fraction: float, low: int, high: int) -> float:
    # Compare in percent, keep the untouched fraction exact
    if fraction * 100.0 < low:
        return low / 100.0
    if fraction * 100.0 > high:
        return high / 100.0
    return fraction

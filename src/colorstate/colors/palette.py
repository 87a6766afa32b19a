"""Named color constants - 8-bit RGB (0-255)."""

from colorstate.models.color import Color


class COLORS:
    """Standard color constants.

    These are the colors color-name lookup can answer with. Each constant
    is opaque; name lookup ignores alpha.
    """

    # ============================================================================
    # ACHROMATIC
    # ============================================================================

    BLACK: Color = Color(r=0, g=0, b=0)
    WHITE: Color = Color(r=255, g=255, b=255)
    GRAY: Color = Color(r=128, g=128, b=128)
    SILVER: Color = Color(r=192, g=192, b=192)

    # ============================================================================
    # WARM
    # ============================================================================

    RED: Color = Color(r=255, g=0, b=0)
    MAROON: Color = Color(r=128, g=0, b=0)
    ORANGE: Color = Color(r=255, g=165, b=0)
    BROWN: Color = Color(r=150, g=75, b=0)
    YELLOW: Color = Color(r=255, g=255, b=0)
    OLIVE: Color = Color(r=128, g=128, b=0)

    # ============================================================================
    # GREENS & CYANS
    # ============================================================================

    LIME: Color = Color(r=128, g=255, b=0)
    GREEN: Color = Color(r=0, g=255, b=0)
    TEAL: Color = Color(r=0, g=128, b=128)
    CYAN: Color = Color(r=0, g=255, b=255)

    # ============================================================================
    # BLUES & PURPLES
    # ============================================================================

    NAVY: Color = Color(r=0, g=0, b=128)
    BLUE: Color = Color(r=0, g=0, b=255)
    INDIGO: Color = Color(r=75, g=0, b=130)
    PURPLE: Color = Color(r=128, g=0, b=255)
    MAGENTA: Color = Color(r=255, g=0, b=255)
    PINK: Color = Color(r=255, g=105, b=180)


# Lookup order matters: ties go to the earlier entry.
NAMED_COLORS: dict[str, Color] = {
    "Black": COLORS.BLACK,
    "White": COLORS.WHITE,
    "Gray": COLORS.GRAY,
    "Silver": COLORS.SILVER,
    "Red": COLORS.RED,
    "Maroon": COLORS.MAROON,
    "Orange": COLORS.ORANGE,
    "Brown": COLORS.BROWN,
    "Yellow": COLORS.YELLOW,
    "Olive": COLORS.OLIVE,
    "Lime": COLORS.LIME,
    "Green": COLORS.GREEN,
    "Teal": COLORS.TEAL,
    "Cyan": COLORS.CYAN,
    "Navy": COLORS.NAVY,
    "Blue": COLORS.BLUE,
    "Indigo": COLORS.INDIGO,
    "Purple": COLORS.PURPLE,
    "Magenta": COLORS.MAGENTA,
    "Pink": COLORS.PINK,
}

"""Platform color model (8-bit RGBA)."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(BaseModel):
    """Standard 8-bit RGBA color model.

    This is the representation exchanged with the rendering layer: four
    channels, 0-255 each, alpha defaulting to fully opaque. ColorState
    holds the normalized working representation and projects to and from
    this model.

    The model is frozen to ensure hashability, which is required for
    LRU caching in color name lookup.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")
    a: int = Field(default=255, ge=0, le=255, description="Alpha (0-255)")

    @field_validator("r", "g", "b", "a")
    @classmethod
    def validate_channel(cls, v: int) -> int:
        """Ensure channel values are in valid range."""
        if not 0 <= v <= 255:
            raise ValueError("Channel values must be between 0 and 255")
        return v

    @classmethod
    def off(cls) -> "Color":
        """Create opaque black."""
        return cls(r=0, g=0, b=0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_rgba_tuple(self) -> tuple[int, int, int, int]:
        """Convert to RGBA tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_hex(self, include_alpha: bool = False) -> str:
        """Convert to hex color string.

        Args:
            include_alpha: Prefix the alpha byte (#AARRGGBB)

        Returns:
            str: '#RRGGBB' or '#AARRGGBB', uppercase

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
            >>> Color(r=255, g=0, b=0, a=128).to_hex(include_alpha=True)
            '#80FF0000'
        """
        if include_alpha:
            return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

"""Hue / saturation / value limits for a color picker."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .color_state import ColorState


class ColorBounds(BaseModel):
    """Inclusive HSV bounds a picker keeps its color within.

    Hue is in whole degrees (0-359); saturation and value are percentages
    (0-100). Restricting, say, hue to 10-20 confines the picker to a band
    of reds and oranges.
    """

    model_config = ConfigDict(frozen=True)

    min_hue: int = Field(default=0, ge=0, le=359, description="Minimum hue (degrees)")
    max_hue: int = Field(default=359, ge=0, le=359, description="Maximum hue (degrees)")
    min_saturation: int = Field(default=0, ge=0, le=100, description="Minimum saturation (%)")
    max_saturation: int = Field(default=100, ge=0, le=100, description="Maximum saturation (%)")
    min_value: int = Field(default=0, ge=0, le=100, description="Minimum value (%)")
    max_value: int = Field(default=100, ge=0, le=100, description="Maximum value (%)")

    @model_validator(mode="after")
    def validate_ranges(self) -> "ColorBounds":
        """Ensure each minimum does not exceed its maximum."""
        for name in ("hue", "saturation", "value"):
            low = getattr(self, f"min_{name}")
            high = getattr(self, f"max_{name}")
            if low > high:
                raise ValueError(f"min_{name} ({low}) must not exceed max_{name} ({high})")
        return self

    def clamp(self, state: ColorState) -> ColorState:
        """Clamp a state to these bounds."""
        return state.clamp_to_bounds(
            min_hue=self.min_hue,
            max_hue=self.max_hue,
            min_saturation=self.min_saturation,
            max_saturation=self.max_saturation,
            min_value=self.min_value,
            max_value=self.max_value,
        )

    def contains(self, state: ColorState) -> bool:
        """Check whether a state already lies within these bounds."""
        return self.clamp(state) is state

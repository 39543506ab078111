"""Top-level data record shared by the picker widgets."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .color import Color
from .enums import OutputFormat, Theme


class PickerData(BaseModel):
    """
    The application's single source of truth for the selected color.

    Widgets never own this record. They receive it in their event
    handlers, mutate it, and signal the host to redraw and refresh.

    `hue` is kept next to `color` because the hue of a gray is undefined:
    after picking a hue on the strip the plane must keep showing that hue
    even while the color itself is black, white or gray.
    """

    model_config = ConfigDict(validate_assignment=True)

    color: Color = Field(default_factory=Color.black, description="Currently selected color")
    hue: float = Field(default=0.0, description="Picker hue in degrees [0, 360]")
    theme: Theme = Field(default=Theme.DARK, description="Window theme")
    output: OutputFormat = Field(default=OutputFormat.CSS, description="Copyable text format")

    @field_validator("hue")
    @classmethod
    def clamp_hue(cls, v: float) -> float:
        """Clamp into [0, 360] so the strip indicator can rest on either edge."""
        if not math.isfinite(v):
            return 0.0
        return min(max(v, 0.0), 360.0)

    @classmethod
    def from_color(cls, color: Color, **kwargs) -> "PickerData":
        """Create a record whose picker hue follows the given color."""
        hue, _, _ = color.to_hsv()
        return cls(color=color, hue=hue, **kwargs)

    def set_color(self, color: Color) -> None:
        """
        Replace the color, keeping the picker hue when the color is gray.

        Used for programmatic changes (hex paste). Pointer-driven changes
        write `color` and `hue` directly.
        """
        hue, saturation, value = color.to_hsv()
        self.color = color
        if saturation > 0.0 and value > 0.0:
            self.hue = hue

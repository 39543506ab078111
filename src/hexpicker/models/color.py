"""Color model and color-space conversions."""

import math
import re

from pydantic import BaseModel, ConfigDict, field_validator

from hexpicker.exceptions import InvalidHexFormatError

_HEX_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


def _unit(value: float) -> float:
    """Clamp to [0, 1], mapping NaN and infinities to 0."""
    if not math.isfinite(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def _degrees(hue: float) -> float:
    """Wrap a hue into [0, 360), mapping NaN and infinities to 0."""
    if not math.isfinite(hue):
        return 0.0
    return hue % 360.0


def _hue_of(r: float, g: float, b: float, mx: float, delta: float) -> float:
    """Hue in degrees shared by the HSL and HSV transforms."""
    if delta <= 0.0:
        # Undefined for grays; fixed to 0 by convention
        return 0.0
    if mx == r:
        hue = 60.0 * (((g - b) / delta) % 6.0)
    elif mx == g:
        hue = 60.0 * ((b - r) / delta + 2.0)
    else:
        hue = 60.0 * ((r - g) / delta + 4.0)
    return hue if hue < 360.0 else hue - 360.0


class Color(BaseModel):
    """Opaque color stored as linear r, g, b floats in [0, 1].

    This is the canonical representation. HSL, HSV, RGB-8 and hex forms
    are derived on demand and never cached. Channels are sanitized on
    construction, so out-of-range numbers never raise.

    The model is frozen so colors are hashable and safe to share between
    widgets.
    """

    model_config = ConfigDict(frozen=True)

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @field_validator("r", "g", "b")
    @classmethod
    def clamp_channel(cls, v: float) -> float:
        """Keep channels inside [0, 1]."""
        return _unit(v)

    @classmethod
    def black(cls) -> "Color":
        """Create black."""
        return cls(r=0.0, g=0.0, b=0.0)

    @classmethod
    def white(cls) -> "Color":
        """Create white."""
        return cls(r=1.0, g=1.0, b=1.0)

    # HSV

    def to_hsv(self) -> tuple[float, float, float]:
        """Convert to (hue degrees in [0, 360), saturation, value).

        Example:
            >>> Color(r=1.0, g=0.0, b=0.0).to_hsv()
            (0.0, 1.0, 1.0)
        """
        r, g, b = self.r, self.g, self.b
        mx = max(r, g, b)
        delta = mx - min(r, g, b)
        hue = _hue_of(r, g, b, mx, delta)
        saturation = delta / mx if mx > 0.0 else 0.0
        return hue, _unit(saturation), mx

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "Color":
        """Create a color from hue (degrees, wrapped), saturation and value.

        Uses the per-channel form ``v - v*s*max(0, min(k, 4-k, 1))`` with
        ``k = (n + h/60) mod 6``. `hexpicker.imaging.gradients` evaluates the
        same expression over whole arrays, so both paths agree bit for bit.
        """
        h = _degrees(h)
        s = _unit(s)
        v = _unit(v)

        def channel(n: float) -> float:
            k = (n + h / 60.0) % 6.0
            return v - v * s * min(max(min(k, 4.0 - k), 0.0), 1.0)

        return cls(r=channel(5.0), g=channel(3.0), b=channel(1.0))

    # HSL

    def to_hsl(self) -> tuple[float, float, float]:
        """Convert to (hue degrees in [0, 360), saturation, lightness)."""
        r, g, b = self.r, self.g, self.b
        mx = max(r, g, b)
        mn = min(r, g, b)
        delta = mx - mn
        lightness = (mx + mn) / 2.0
        hue = _hue_of(r, g, b, mx, delta)
        denominator = 1.0 - abs(2.0 * lightness - 1.0)
        saturation = delta / denominator if delta > 0.0 and denominator > 0.0 else 0.0
        return hue, _unit(saturation), _unit(lightness)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "Color":
        """Create a color from hue (degrees, wrapped), saturation and lightness."""
        h = _degrees(h)
        s = _unit(s)
        l = _unit(l)
        a = s * min(l, 1.0 - l)

        def channel(n: float) -> float:
            k = (n + h / 30.0) % 12.0
            return l - a * max(min(k - 3.0, 9.0 - k, 1.0), -1.0)

        return cls(r=channel(0.0), g=channel(8.0), b=channel(4.0))

    # 8-bit and hex

    def to_rgb8(self) -> tuple[int, int, int]:
        """Convert to 8-bit channels, rounding halves up.

        Example:
            >>> Color(r=1.0, g=0.5, b=0.0).to_rgb8()
            (255, 128, 0)
        """
        return tuple(min(max(math.floor(c * 255.0 + 0.5), 0), 255) for c in (self.r, self.g, self.b))

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Convert to 8-bit channels plus an opaque alpha."""
        r, g, b = self.to_rgb8()
        return r, g, b, 255

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from 8-bit channels."""
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0)

    def to_hex(self) -> str:
        """Convert to a lowercase CSS hex string (e.g., '#cc85c5')."""
        r, g, b = self.to_rgb8()
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse '#rrggbb' (case-insensitive).

        Raises:
            InvalidHexFormatError: If text is not '#' followed by exactly six hex digits
        """
        if not isinstance(text, str) or not _HEX_PATTERN.fullmatch(text):
            raise InvalidHexFormatError(text)
        value = int(text[1:], 16)
        return cls.from_rgb8((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def __str__(self) -> str:
        return self.to_hex()

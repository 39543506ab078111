"""Raster synthesis for the hue strip and the saturation/value plane.

Images have a fixed resolution that does not depend on on-screen size:
1x256 for the hue strip and 256x256 for the plane. Scaling to the widget
is the renderer's job.

All functions are deterministic and read nothing but their arguments.
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from hexpicker.models import PlaneStrategy

logger = logging.getLogger(__name__)

GRADIENT_STEPS = 256
HUE_STRIP_SIZE = (1, GRADIENT_STEPS)
PLANE_SIZE = (GRADIENT_STEPS, GRADIENT_STEPS)

# Channel offsets n for red, green and blue in v - v*s*max(0, min(k, 4-k, 1))
_HSV_OFFSETS = (5.0, 3.0, 1.0)


@dataclass(frozen=True, eq=False)
class GradientImage:
    """An RGBA8 raster buffer.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        pixels: uint8 array of shape (height, width, 4)
    """

    width: int
    height: int
    pixels: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        if self.pixels.shape != (self.height, self.width, 4) or self.pixels.dtype != np.uint8:
            raise ValueError(
                f"Expected uint8 pixels of shape {(self.height, self.width, 4)}, "
                f"got {self.pixels.dtype} {self.pixels.shape}"
            )
        self.pixels.setflags(write=False)

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """RGBA of the pixel at column x, row y."""
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def to_bytes(self) -> bytes:
        """Row-major RGBA8 bytes (width*height*4)."""
        return self.pixels.tobytes()


def hsv_to_rgb_array(h, s, v) -> np.ndarray:
    """Vectorized HSV to RGB.

    Same arithmetic, in the same order, as `Color.from_hsv`: hue wrapped
    to [0, 360), saturation and value clamped to [0, 1], NaN treated as 0.
    Arguments broadcast against each other.

    Returns:
        float64 array with a trailing axis of 3 (r, g, b) in [0, 1]
    """
    h = np.nan_to_num(np.asarray(h, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)
    s = np.nan_to_num(np.asarray(s, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)
    v = np.nan_to_num(np.asarray(v, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)

    h = np.mod(h, 360.0)
    s = np.clip(s, 0.0, 1.0)
    v = np.clip(v, 0.0, 1.0)
    h, s, v = np.broadcast_arrays(h, s, v)

    channels = []
    for n in _HSV_OFFSETS:
        k = np.mod(n + h / 60.0, 6.0)
        channels.append(v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0))
    return np.clip(np.stack(channels, axis=-1), 0.0, 1.0)


def to_rgba8_array(rgb: np.ndarray) -> np.ndarray:
    """Quantize float RGB (trailing axis 3) to opaque RGBA8, rounding halves up."""
    rgb8 = np.clip(np.floor(np.clip(rgb, 0.0, 1.0) * 255.0 + 0.5), 0, 255).astype(np.uint8)
    alpha = np.full(rgb8.shape[:-1] + (1,), 255, dtype=np.uint8)
    return np.concatenate([rgb8, alpha], axis=-1)


def _unit_steps() -> np.ndarray:
    """0/255, 1/255, ..., 255/255."""
    return np.arange(GRADIENT_STEPS, dtype=np.float64) / 255.0


def hue_strip_image() -> GradientImage:
    """Build the 1x256 hue strip: pixel i is HSV(i/255 * 360, 1, 1)."""
    hues = _unit_steps() * 360.0
    rgba = to_rgba8_array(hsv_to_rgb_array(hues, 1.0, 1.0))
    width, height = HUE_STRIP_SIZE
    return GradientImage(width=width, height=height, pixels=rgba.reshape(height, width, 4))


def plane_image(hue: float) -> GradientImage:
    """Build the 256x256 plane for `hue`: pixel (i, j) is HSV(hue, i/255, 1 - j/255).

    Columns run along saturation, rows along value with the top row at
    full value.
    """
    steps = _unit_steps()
    saturation = steps[np.newaxis, :]
    value = 1.0 - steps[:, np.newaxis]
    rgba = to_rgba8_array(hsv_to_rgb_array(hue, saturation, value))
    width, height = PLANE_SIZE
    return GradientImage(width=width, height=height, pixels=rgba)


class OverlayPlaneSynthesizer:
    """
    Plane synthesis from a static neutral image plus a hue tint.

    HSV(h, s, v) per channel equals ``v*(1-s) + v*s*c`` where ``c`` is the
    channel of the fully saturated hue color HSV(h, 1, 1). The white
    weight ``v*(1-s)`` and tint weight ``v*s`` depend only on pixel
    position, so they are computed once; each hue only costs a
    multiply-add. Pixels match `plane_image` within one 8-bit step.
    """

    def __init__(self) -> None:
        steps = _unit_steps()
        saturation = steps[np.newaxis, :]
        value = 1.0 - steps[:, np.newaxis]
        self._white = (value * (1.0 - saturation))[..., np.newaxis]
        self._tint = (value * saturation)[..., np.newaxis]

    def synthesize(self, hue: float) -> GradientImage:
        """Composite the neutral weights with the hue color."""
        hue_rgb = hsv_to_rgb_array(hue, 1.0, 1.0)
        rgba = to_rgba8_array(self._white + self._tint * hue_rgb)
        width, height = PLANE_SIZE
        return GradientImage(width=width, height=height, pixels=rgba)


class PlaneImageCache:
    """
    Holds the current plane image and regenerates it only on hue change.

    Example:
        ```python
        cache = PlaneImageCache(PlaneStrategy.DYNAMIC)
        image = cache.image_for(data.hue)   # synthesized
        image = cache.image_for(data.hue)   # cached
        ```
    """

    def __init__(self, strategy: PlaneStrategy = PlaneStrategy.DYNAMIC, hue: float = 0.0):
        """
        Initialize the cache and build the first image.

        Args:
            strategy: Dynamic per-hue synthesis or static overlay
            hue: Hue of the first image
        """
        self.strategy = PlaneStrategy(strategy)
        self._overlay = OverlayPlaneSynthesizer() if self.strategy is PlaneStrategy.OVERLAY else None
        self._hue = float(hue)
        self._image = self._synthesize(self._hue)
        self.generation_count = 1

    @property
    def hue(self) -> float:
        """Hue of the cached image."""
        return self._hue

    def image_for(self, hue: float) -> GradientImage:
        """Return the plane for `hue`, synthesizing only if the hue changed."""
        hue = float(hue)
        if hue != self._hue:
            self._image = self._synthesize(hue)
            self._hue = hue
            self.generation_count += 1
            logger.debug(f"Regenerated {self.strategy.value} plane for hue {hue:.2f}")
        return self._image

    def _synthesize(self, hue: float) -> GradientImage:
        if self._overlay is not None:
            return self._overlay.synthesize(hue)
        return plane_image(hue)

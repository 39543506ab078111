"""Gradient image synthesis for the picker backgrounds."""

from .gradients import (
    GRADIENT_STEPS,
    HUE_STRIP_SIZE,
    PLANE_SIZE,
    GradientImage,
    OverlayPlaneSynthesizer,
    PlaneImageCache,
    hsv_to_rgb_array,
    hue_strip_image,
    plane_image,
    to_rgba8_array,
)

__all__ = [
    "GRADIENT_STEPS",
    "HUE_STRIP_SIZE",
    "PLANE_SIZE",
    "GradientImage",
    "OverlayPlaneSynthesizer",
    "PlaneImageCache",
    "hsv_to_rgb_array",
    "hue_strip_image",
    "plane_image",
    "to_rgba8_array",
]

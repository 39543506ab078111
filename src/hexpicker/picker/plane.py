"""Two-axis saturation/value picker."""

from dataclasses import dataclass, field

from hexpicker.imaging import GradientImage, PlaneImageCache
from hexpicker.models import Color, PickerData, PlaneStrategy

from .base import PickerWidget


@dataclass(frozen=True)
class PlaneMarker:
    """Ring centred on (x, y), white inside a black outline."""

    x: float
    y: float
    inner_size: float = 6.0
    outer_size: float = 8.0
    inner: Color = field(default_factory=Color.white)
    outer: Color = field(default_factory=Color.black)


class PlanePicker(PickerWidget):
    """
    Square saturation/value plane for the picker hue.

    Saturation grows to the right, value grows upwards, so the top-left
    corner is white and the bottom edge is black.
    """

    def __init__(self, host=None, strategy: PlaneStrategy = PlaneStrategy.DYNAMIC, hue: float = 0.0):
        super().__init__(host)
        self._images = PlaneImageCache(strategy, hue)

    @property
    def images(self) -> PlaneImageCache:
        return self._images

    @staticmethod
    def color_at(hue: float, u: float, v: float) -> Color:
        """Color shown at normalized (u, v) for `hue`."""
        return Color.from_hsv(hue, u, 1.0 - v)

    def apply(self, data: PickerData, u: float, v: float) -> None:
        data.color = self.color_at(data.hue, u, v)

    def image(self, data: PickerData) -> GradientImage:
        return self._images.image_for(data.hue)

    def overlay(self, data: PickerData) -> PlaneMarker:
        _, saturation, value = data.color.to_hsv()
        return PlaneMarker(
            x=saturation * self.bounds.width,
            y=(1.0 - value) * self.bounds.height,
        )

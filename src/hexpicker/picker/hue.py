"""One-axis hue picker."""

from dataclasses import dataclass, field

from hexpicker.imaging import GradientImage, hue_strip_image
from hexpicker.models import Color, PickerData

from .base import PickerWidget


@dataclass(frozen=True)
class HueIndicator:
    """Horizontal bar across the strip at `y` (local coordinates)."""

    y: float
    width: float
    thickness: float = 6.0
    outline: Color = field(default_factory=Color.white)


class HuePicker(PickerWidget):
    """
    Vertical hue strip: top is hue 0, bottom is hue 360.

    Picking a hue keeps the saturation and value of the current color and
    only replaces its hue. At zero saturation or value the RGB color does
    not change, but `data.hue` still moves so the plane shows the new hue.
    """

    def __init__(self, host=None):
        super().__init__(host)
        # Independent of the data record
        self._image = hue_strip_image()

    def apply(self, data: PickerData, u: float, v: float) -> None:
        hue = v * 360.0
        _, saturation, value = data.color.to_hsv()
        data.color = Color.from_hsv(hue, saturation, value)
        data.hue = hue

    def image(self, data: PickerData) -> GradientImage:
        return self._image

    def overlay(self, data: PickerData) -> HueIndicator:
        return HueIndicator(y=data.hue / 360.0 * self.bounds.height, width=self.bounds.width)

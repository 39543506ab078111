"""Hex Picker: HSV color picker with copyable CSS and literal output."""

__version__ = "0.1.0"

from .models import Color, PickerData
from .picker import HuePicker, PlanePicker

__all__ = [
    "Color",
    "HuePicker",
    "PickerData",
    "PlanePicker",
]

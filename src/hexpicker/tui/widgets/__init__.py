"""Reusable UI widgets for the TUI."""

from .copy_button import CopyButton
from .output_panel import CopyableRow, OutputPanel
from .picker_view import HueStripView, PickerView, PlaneView
from .swatch import Swatch

__all__ = [
    "CopyButton",
    "CopyableRow",
    "HueStripView",
    "OutputPanel",
    "PickerView",
    "PlaneView",
    "Swatch",
]

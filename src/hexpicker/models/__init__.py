"""Data models for the color picker."""

from .color import Color
from .config import AppConfig
from .data import PickerData
from .enums import OutputFormat, PlaneStrategy, Theme

__all__ = [
    # Models
    "AppConfig",
    "Color",
    "PickerData",
    # Enums
    "OutputFormat",
    "PlaneStrategy",
    "Theme",
]

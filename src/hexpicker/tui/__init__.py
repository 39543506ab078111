"""Terminal user interface for Hex Picker."""

from .app import HexPickerApp

__all__ = ["HexPickerApp"]

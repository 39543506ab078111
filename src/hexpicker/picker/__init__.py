"""Host-agnostic picker widgets and their interaction state machines."""

from .base import PickerWidget
from .copy_feedback import CopyFeedback, CopyState
from .hue import HueIndicator, HuePicker
from .interaction import Bounds, DragState, PointerTracker, clamp_unit
from .plane import PlaneMarker, PlanePicker

__all__ = [
    "Bounds",
    "CopyFeedback",
    "CopyState",
    "DragState",
    "HueIndicator",
    "HuePicker",
    "PickerWidget",
    "PlaneMarker",
    "PlanePicker",
    "PointerTracker",
    "clamp_unit",
]

"""Protocol definitions for events, observers and the widget host."""

from .events import AppEvent, ColorEvent
from .observers import AppObserver, ColorObserver, PickerHost

__all__ = [
    # Events
    "AppEvent",
    "ColorEvent",
    # Observers
    "AppObserver",
    "ColorObserver",
    "PickerHost",
]

"""Shared event plumbing for the picker widgets."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from hexpicker.imaging import GradientImage
from hexpicker.models import PickerData
from hexpicker.protocols import PickerHost

from .interaction import Bounds, PointerTracker

logger = logging.getLogger(__name__)


class PickerWidget(ABC):
    """
    A drawable, interactive picker region, independent of any GUI toolkit.

    The host lays the widget out (`resize`), forwards pointer events with
    positions in local coordinates, and draws `image()` stretched over the
    widget with `overlay()` on top. Every committed color is followed by
    a refresh and a redraw request to the host.
    """

    def __init__(self, host: Optional[PickerHost] = None):
        self.host = host
        self.bounds = Bounds()
        self.tracker = PointerTracker()

    @property
    def dragging(self) -> bool:
        return self.tracker.dragging

    def resize(self, width: float, height: float) -> None:
        """Record the laid-out size (the hot region)."""
        self.bounds = Bounds(width=width, height=height)

    def pointer_pressed(self, data: PickerData, x: float, y: float) -> bool:
        """Handle a pointer press; returns True if a color was committed."""
        uv = self.tracker.press(x, y, self.bounds)
        if uv is None:
            return False
        self._commit(data, uv)
        return True

    def pointer_moved(self, data: PickerData, x: float, y: float) -> bool:
        """Handle a pointer move; a no-op unless dragging."""
        uv = self.tracker.move(x, y, self.bounds)
        if uv is None:
            return False
        self._commit(data, uv)
        return True

    def pointer_released(self) -> None:
        """Handle a pointer release, wherever it happened."""
        self.tracker.release()

    def _commit(self, data: PickerData, uv: tuple[float, float]) -> None:
        self.apply(data, *uv)
        if self.host is not None:
            self.host.request_refresh()
            self.host.request_redraw()

    @abstractmethod
    def apply(self, data: PickerData, u: float, v: float) -> None:
        """Write the color selected at normalized (u, v) into `data`."""

    @abstractmethod
    def image(self, data: PickerData) -> GradientImage:
        """Background image for the current data."""

    @abstractmethod
    def overlay(self, data: PickerData):
        """Indicator geometry for the current data and size."""

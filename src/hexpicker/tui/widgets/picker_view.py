"""Textual hosts for the picker widgets."""

import logging
from typing import Optional

from textual import events
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from hexpicker.models import PickerData, PlaneStrategy
from hexpicker.picker import HuePicker, PickerWidget, PlanePicker

from ..rendering import CellGrid, cell_index, rgb_of

logger = logging.getLogger(__name__)

HUE_BAR = "━"
PLANE_RING = "◉"


class PickerView(Widget):
    """
    Hosts a `PickerWidget` inside a Textual widget.

    Local cell coordinates go straight to the picker, so its hot region
    is the widget's content size in cells. The mouse is captured on press
    so a drag keeps updating (clamped) after the pointer leaves the widget.
    """

    class ColorCommitted(Message):
        """Posted after the picker wrote a new color into the data record."""

        def __init__(self, view: "PickerView"):
            super().__init__()
            self.view = view

        @property
        def control(self) -> "PickerView":
            return self.view

    def __init__(self, picker: PickerWidget, data: PickerData, **kwargs):
        super().__init__(**kwargs)
        self.picker = picker
        self.picker.host = self
        self.picker_data = data
        self._strips: Optional[list[Strip]] = None

    # =================================================================
    # PickerHost Protocol
    # =================================================================

    def request_redraw(self) -> None:
        self._strips = None
        self.refresh()

    def request_refresh(self) -> None:
        self.post_message(self.ColorCommitted(self))

    # =================================================================
    # Layout & Pointer Events
    # =================================================================

    def on_resize(self, event: events.Resize) -> None:
        self.picker.resize(event.size.width, event.size.height)
        self._strips = None

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if event.button != 1:
            return
        if self.picker.pointer_pressed(self.picker_data, event.x, event.y):
            self.capture_mouse()
            event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.picker.pointer_moved(self.picker_data, event.x, event.y):
            event.stop()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.picker.dragging:
            self.picker.pointer_released()
            self.release_mouse()
            event.stop()

    # =================================================================
    # Rendering
    # =================================================================

    def render_line(self, y: int) -> Strip:
        if self._strips is None or len(self._strips) != self.size.height:
            self._strips = self._build_strips()
        if 0 <= y < len(self._strips):
            return self._strips[y]
        return Strip.blank(self.size.width)

    def _build_strips(self) -> list[Strip]:
        width, height = self.size.width, self.size.height
        grid = CellGrid(self.picker.image(self.picker_data), width, height)
        if width > 0 and height > 0:
            self.draw_overlay(grid)
        return grid.strips()

    def draw_overlay(self, grid: CellGrid) -> None:
        """Mark the current selection on top of the image."""


class HueStripView(PickerView):
    """Vertical hue strip."""

    DEFAULT_CSS = """
    HueStripView {
        width: 4;
        height: 100%;
        margin-left: 1;
    }
    """

    def __init__(self, data: PickerData, **kwargs):
        super().__init__(HuePicker(), data, **kwargs)

    def draw_overlay(self, grid: CellGrid) -> None:
        indicator = self.picker.overlay(self.picker_data)
        row = cell_index(indicator.y, grid.height)
        fg = rgb_of(indicator.outline)
        for x in range(grid.width):
            grid.put(x, row, HUE_BAR, fg, grid.background_at(x, row))


class PlaneView(PickerView):
    """Saturation/value plane for the current hue."""

    DEFAULT_CSS = """
    PlaneView {
        width: 32;
        height: 100%;
    }
    """

    def __init__(self, data: PickerData, strategy: PlaneStrategy = PlaneStrategy.DYNAMIC, **kwargs):
        super().__init__(PlanePicker(strategy=strategy, hue=data.hue), data, **kwargs)

    def draw_overlay(self, grid: CellGrid) -> None:
        marker = self.picker.overlay(self.picker_data)
        grid.put(
            cell_index(marker.x, grid.width),
            cell_index(marker.y, grid.height),
            PLANE_RING,
            rgb_of(marker.inner),
            rgb_of(marker.outer),
        )

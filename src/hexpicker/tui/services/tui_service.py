"""Service for keeping the TUI in sync with the picker data."""

import logging
from typing import TYPE_CHECKING

from textual.widgets import Button, Static

from hexpicker.models import OutputFormat, PickerData, Theme
from hexpicker.protocols import AppEvent, AppObserver, ColorEvent, ColorObserver
from hexpicker.tui.widgets import HueStripView, OutputPanel, PlaneView, Swatch

if TYPE_CHECKING:
    from hexpicker.tui.app import HexPickerApp

logger = logging.getLogger(__name__)

TEXTUAL_THEMES = {
    Theme.DARK: "textual-dark",
    Theme.LIGHT: "textual-light",
}


class TUIService(ColorObserver, AppObserver):
    """
    Pushes the data record into the widgets.

    Implements:
    - ColorObserver: Color changes (picker drags, pasted hex, resets)
    - AppObserver: Theme and output format changes
    """

    def __init__(self, app: "HexPickerApp"):
        self.app = app
        logger.info("TUIService initialized")

    # =================================================================
    # ColorObserver Protocol
    # =================================================================

    def on_color_event(self, event: ColorEvent, data: PickerData) -> None:
        logger.debug(f"TUIService handling {event.value}: {data.color.to_hex()}")
        self.sync_color(data)

    # =================================================================
    # AppObserver Protocol
    # =================================================================

    def on_app_event(self, event: AppEvent, data: PickerData) -> None:
        if event == AppEvent.THEME_CHANGED:
            self.sync_theme(data)
        elif event == AppEvent.OUTPUT_CHANGED:
            self.sync_output(data)
        else:
            logger.warning(f"TUIService received unknown app event: {event}")

    # =================================================================
    # Widget Updates
    # =================================================================

    def sync_all(self, data: PickerData) -> None:
        """Bring every widget up to date, e.g. after mounting."""
        self.sync_theme(data)
        self.sync_color(data)
        self.sync_output(data)

    def sync_color(self, data: PickerData) -> None:
        self.app.query_one("#hex-label", Static).update(data.color.to_hex())
        self.app.query_one(Swatch).show(data.color)
        self.app.query_one(HueStripView).request_redraw()
        self.app.query_one(PlaneView).request_redraw()
        self._show_lines()

    def sync_theme(self, data: PickerData) -> None:
        self.app.theme = TEXTUAL_THEMES[data.theme]
        self.app.query_one("#theme", Button).label = "☀" if data.theme == Theme.DARK else "☾"

    def sync_output(self, data: PickerData) -> None:
        for output in OutputFormat:
            button = self.app.query_one(f"#format-{output.value}", Button)
            button.variant = "primary" if output == data.output else "default"
        self._show_lines()

    def _show_lines(self) -> None:
        self.app.query_one(OutputPanel).show(self.app.service.output_lines())

"""Main TUI application."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Input, Static

from hexpicker.models import AppConfig, OutputFormat, PickerData
from hexpicker.services import ColorService

from .decorators import handle_action_errors
from .services import TUIService
from .widgets import CopyButton, HueStripView, OutputPanel, PickerView, PlaneView, Swatch

logger = logging.getLogger(__name__)


class HexPickerApp(App):
    """
    Textual color picker.

    A pure UI layer: the `ColorService` owns the data record, the picker
    views write colors into it from pointer input, and `TUIService`
    pushes every change back into the widgets.

    Layout (top to bottom):
    - Top bar: theme toggle, hex code, close button
    - Saturation/value plane with the hue strip on its right
    - Swatch of the selected color
    - Output format selector and the copyable rows
    - Hex input for pasting a color
    """

    TITLE = "Hex Picker"

    # Keep the keyboard free for bindings until the hex input is clicked
    AUTO_FOCUS = None

    CSS = """
    #topbar {
        height: 3;
    }

    #hex-label {
        width: 1fr;
        content-align: center middle;
        height: 3;
        text-style: bold;
    }

    #pickers {
        height: auto;
    }

    #formats {
        height: 3;
    }

    #formats Button {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("t", "toggle_theme", "Theme", show=True),
        Binding("o", "cycle_output", "Output", show=True),
        Binding("escape", "quit", "Close", show=True),
        Binding("q", "quit", "Close", show=False),
    ]

    # =================================================================
    # Initialization & Lifecycle
    # =================================================================

    def __init__(self, config: Optional[AppConfig] = None, service: Optional[ColorService] = None):
        """
        Initialize the Textual UI application.

        Args:
            config: Application settings (defaults if omitted)
            service: Color service; built from `config.initial_data()` if omitted
        """
        super().__init__()
        self.config = config or AppConfig()
        self.service = service or ColorService(self.config.initial_data())
        self.tui_service = TUIService(self)
        logger.info("HexPickerApp created")

    @property
    def picker_data(self) -> PickerData:
        """READ-ONLY access to the data record; change it through `service`."""
        return self.service.data

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        with Horizontal(id="topbar"):
            yield Button("☀", id="theme")
            yield Static(self.picker_data.color.to_hex(), id="hex-label")
            yield Button("✕", id="close", variant="error")

        with Horizontal(id="pickers"):
            yield PlaneView(self.picker_data, strategy=self.config.plane_strategy, id="plane")
            yield HueStripView(self.picker_data, id="hue")

        yield Swatch(id="swatch")

        with Horizontal(id="formats"):
            yield Button("CSS", id=f"format-{OutputFormat.CSS.value}")
            yield Button("Literal", id=f"format-{OutputFormat.LITERAL.value}")

        yield OutputPanel(timeout=self.config.copied_feedback_seconds, id="output")
        yield Input(placeholder="Paste a hex color, e.g. #cc85c5", id="hex-input")
        yield Footer()

    def on_mount(self) -> None:
        rows = self.config.picker_rows
        self.query_one("#pickers").styles.height = rows
        # Each cell holds two pixel rows; the plane stays square
        self.query_one(PlaneView).styles.width = 2 * rows

        self.service.register_color_observer(self.tui_service)
        self.service.register_app_observer(self.tui_service)
        self.tui_service.sync_all(self.picker_data)
        logger.info("TUI mount complete")

    def on_unmount(self) -> None:
        self.service.unregister_color_observer(self.tui_service)
        self.service.unregister_app_observer(self.tui_service)
        logger.info("TUI unmounted")

    # =================================================================
    # Event Handlers
    # =================================================================

    def on_picker_view_color_committed(self, message: PickerView.ColorCommitted) -> None:
        self.service.color_committed()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "theme":
            self.action_toggle_theme()
        elif button_id == "close":
            self.exit()
        elif button_id and button_id.startswith("format-"):
            self.service.set_output(OutputFormat(button_id.removeprefix("format-")))

    def on_copy_button_copied(self, message: CopyButton.Copied) -> None:
        logger.info(f"Copied {message.text!r}")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "hex-input":
            self.apply_hex(event.value)

    # =================================================================
    # Actions
    # =================================================================

    def action_toggle_theme(self) -> None:
        self.service.toggle_theme()

    def action_cycle_output(self) -> None:
        self.service.cycle_output()

    @handle_action_errors("apply hex color")
    def apply_hex(self, text: str) -> None:
        """Replace the color with pasted hex text; errors are shown as notifications."""
        color = self.service.apply_hex(text)
        self.query_one("#hex-input", Input).value = ""
        self.notify(f"Color set to {color.to_hex()}", timeout=2)

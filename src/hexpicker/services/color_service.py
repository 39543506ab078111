"""Color service owning the picker's data record."""

import logging

from hexpicker.formatting import CopyableLine, output_lines
from hexpicker.models import Color, OutputFormat, PickerData
from hexpicker.protocols import AppEvent, AppObserver, ColorEvent, ColorObserver
from hexpicker.utils import ObserverManager

logger = logging.getLogger(__name__)


class ColorService:
    """
    Owns the `PickerData` record and announces changes to it.

    Picker widgets mutate the record directly while handling pointer
    events; the host then calls `color_committed()` so observers (output
    rows, swatch, the other picker) can catch up. Everything else that
    changes the record goes through this service.

    Event-Driven Architecture:
        Color changes emit ColorEvent, theme/output changes emit AppEvent.

    Threading:
        All methods are called from the UI event loop, one event at a time.
    """

    def __init__(self, data: PickerData | None = None):
        """
        Initialize the color service.

        Args:
            data: Initial data record (defaults to black, dark theme, CSS output)
        """
        self._data = data if data is not None else PickerData()
        self._color_observers = ObserverManager[ColorObserver](observer_type_name="color")
        self._app_observers = ObserverManager[AppObserver](observer_type_name="app")
        logger.info(f"ColorService initialized with {self._data.color.to_hex()}")

    @property
    def data(self) -> PickerData:
        """The shared data record."""
        return self._data

    @property
    def color(self) -> Color:
        return self._data.color

    # =================================================================
    # Event System
    # =================================================================

    def register_color_observer(self, observer: ColorObserver) -> None:
        self._color_observers.register(observer)

    def unregister_color_observer(self, observer: ColorObserver) -> None:
        self._color_observers.unregister(observer)

    def register_app_observer(self, observer: AppObserver) -> None:
        self._app_observers.register(observer)

    def unregister_app_observer(self, observer: AppObserver) -> None:
        self._app_observers.unregister(observer)

    def _notify_color(self, event: ColorEvent) -> None:
        self._color_observers.notify("on_color_event", event, self._data)

    def _notify_app(self, event: AppEvent) -> None:
        self._app_observers.notify("on_app_event", event, self._data)

    # =================================================================
    # Color Operations
    # =================================================================

    def color_committed(self) -> None:
        """Announce a color a picker already wrote into the record."""
        logger.debug(f"Color committed: {self._data.color.to_hex()} (hue {self._data.hue:.1f})")
        self._notify_color(ColorEvent.COMMITTED)

    def set_color(self, color: Color) -> None:
        """Replace the color programmatically."""
        self._data.set_color(color)
        logger.info(f"Color set to {color.to_hex()}")
        self._notify_color(ColorEvent.RESET)

    def apply_hex(self, text: str) -> Color:
        """
        Replace the color with a pasted hex string.

        Surrounding whitespace is ignored. On failure the record is left
        untouched.

        Args:
            text: Text such as '#CC85C5'

        Returns:
            The new color

        Raises:
            InvalidHexFormatError: If text is not a '#rrggbb' color
        """
        color = Color.from_hex(text.strip() if isinstance(text, str) else text)
        self._data.set_color(color)
        logger.info(f"Applied hex color {color.to_hex()}")
        self._notify_color(ColorEvent.PASTED)
        return color

    def output_lines(self) -> list[CopyableLine]:
        """Copyable rows for the current color and output format."""
        return output_lines(self._data.color, self._data.output)

    # =================================================================
    # Presentation State
    # =================================================================

    def toggle_theme(self) -> None:
        self._data.theme = self._data.theme.swap()
        logger.debug(f"Theme changed to {self._data.theme.value}")
        self._notify_app(AppEvent.THEME_CHANGED)

    def cycle_output(self) -> None:
        self._data.output = self._data.output.next()
        logger.debug(f"Output format changed to {self._data.output.value}")
        self._notify_app(AppEvent.OUTPUT_CHANGED)

    def set_output(self, output: OutputFormat) -> None:
        """Select an output format; no event if it is already active."""
        if self._data.output == output:
            return
        self._data.output = output
        logger.debug(f"Output format changed to {self._data.output.value}")
        self._notify_app(AppEvent.OUTPUT_CHANGED)

"""Swatch widget filled with the selected color."""

from textual.widgets import Static

from hexpicker.models import Color


class Swatch(Static):
    """A block painted with the current color."""

    DEFAULT_CSS = """
    Swatch {
        height: 3;
        border: round $primary;
    }
    """

    def show(self, color: Color) -> None:
        self.styles.background = color.to_hex()

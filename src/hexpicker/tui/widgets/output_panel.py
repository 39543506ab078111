"""Copyable output rows for the selected color."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from hexpicker.formatting import CopyableLine

from .copy_button import CopyButton

ROW_LABELS = ("hsl", "hsv", "rgb", "hex")


class CopyableRow(Horizontal):
    """Shown text on the left, a copy button on the right."""

    DEFAULT_CSS = """
    CopyableRow {
        height: 1;
    }

    CopyableRow > .shown {
        width: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self, label: str, timeout: float = 1.5, **kwargs):
        super().__init__(**kwargs)
        self.label = label
        self.line: CopyableLine | None = None
        self._timeout = timeout

    def compose(self) -> ComposeResult:
        yield Static("", classes="shown", markup=False)
        yield CopyButton(timeout=self._timeout)

    def show(self, line: CopyableLine) -> None:
        self.line = line
        self.query_one(".shown", Static).update(line.shown)
        self.query_one(CopyButton).copy_text = line.copied


class OutputPanel(Vertical):
    """
    The four copyable rows (hsl, hsv, rgb, hex) for the current color.
    """

    DEFAULT_CSS = """
    OutputPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }
    """

    def __init__(self, timeout: float = 1.5, **kwargs):
        super().__init__(**kwargs)
        self._timeout = timeout

    def compose(self) -> ComposeResult:
        for label in ROW_LABELS:
            yield CopyableRow(label, timeout=self._timeout, id=f"row-{label}")

    def show(self, lines: list[CopyableLine]) -> None:
        """Update rows from `lines`, matched by label."""
        for line in lines:
            self.query_one(f"#row-{line.label}", CopyableRow).show(line)

    def lines(self) -> list[CopyableLine]:
        """Lines currently displayed, in row order."""
        return [row.line for row in self.query(CopyableRow) if row.line is not None]

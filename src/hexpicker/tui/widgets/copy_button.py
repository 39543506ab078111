"""Copy-to-clipboard button with hover/copied feedback."""

import logging
from typing import Optional

from textual import events
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Static

from hexpicker.picker import CopyFeedback, CopyState

logger = logging.getLogger(__name__)


class CopyButton(Static):
    """
    Copies a piece of text when clicked.

    Shows "Copy" while idle or hovered and "Copied!" for a short while
    after a click.
    """

    DEFAULT_CSS = """
    CopyButton {
        width: 9;
        height: 1;
        color: $text-muted;
        content-align: center middle;
    }

    CopyButton.hovering {
        color: $text;
        background: $boost;
    }

    CopyButton.copied {
        color: $success;
        text-style: bold;
    }
    """

    class Copied(Message):
        """Posted after text was put on the clipboard."""

        def __init__(self, text: str):
            super().__init__()
            self.text = text

    def __init__(self, copy_text: str = "", timeout: float = 1.5, **kwargs):
        super().__init__(**kwargs)
        self.copy_text = copy_text
        self.feedback = CopyFeedback(timeout=timeout)
        self._timer: Optional[Timer] = None
        self._update_display()

    def on_enter(self, event: events.Enter) -> None:
        self.feedback.hover()
        self._update_display()

    def on_leave(self, event: events.Leave) -> None:
        self.feedback.leave()
        self._update_display()

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self.copy_text)
        logger.debug(f"Copied to clipboard: {self.copy_text}")
        self.feedback.click()
        if self._timer is not None:
            self._timer.stop()
        self._timer = self.set_timer(self.feedback.timeout, self._expire)
        self._update_display()
        self.post_message(self.Copied(self.copy_text))

    def _expire(self) -> None:
        self._timer = None
        self.feedback.expire()
        self._update_display()

    def _update_display(self) -> None:
        state = self.feedback.state
        self.set_class(state is CopyState.HOVERING, "hovering")
        self.set_class(state is CopyState.COPIED, "copied")
        self.update(self.feedback.tooltip)

"""Hover/click feedback for a copy button.

```
 IDLE ──hover──▶ HOVERING ──click──▶ COPIED
  ▲                │  ▲                │
  └─────leave──────┘  └────expire──────┤
  ▲                                    │
  └───────────────leave────────────────┘
```

The host starts a timer of `timeout` seconds after each `click` and
calls `expire` when it fires.
"""

from enum import Enum


class CopyState(Enum):
    """Feedback state of one copy button."""

    IDLE = "idle"
    HOVERING = "hovering"
    COPIED = "copied"


class CopyFeedback:
    """Three-state machine behind the "Copy" / "Copied!" tooltip."""

    TOOLTIPS = {
        CopyState.IDLE: "Copy",
        CopyState.HOVERING: "Copy",
        CopyState.COPIED: "Copied!",
    }

    def __init__(self, timeout: float = 1.5):
        self.timeout = timeout
        self.state = CopyState.IDLE

    @property
    def tooltip(self) -> str:
        return self.TOOLTIPS[self.state]

    def hover(self) -> None:
        if self.state is CopyState.IDLE:
            self.state = CopyState.HOVERING

    def leave(self) -> None:
        self.state = CopyState.IDLE

    def click(self) -> None:
        self.state = CopyState.COPIED

    def expire(self) -> None:
        if self.state is CopyState.COPIED:
            self.state = CopyState.HOVERING

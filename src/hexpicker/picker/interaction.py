"""Pointer interaction state machine shared by both pickers.

States:

```
            press inside bounds
   IDLE ─────────────────────────▶ DRAGGING ──┐
    ▲                                  │      │ move (anywhere, clamped)
    └──────── release (anywhere) ──────┘ ◀────┘
```

Positions are in the widget's local coordinate space, origin top-left.
Normalized coordinates are always re-derived from the latest event,
never accumulated from deltas.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


def clamp_unit(x: float) -> float:
    """Clamp to [0, 1], mapping NaN to 0."""
    if math.isnan(x):
        return 0.0
    return min(max(x, 0.0), 1.0)


class DragState(Enum):
    """Interaction state of one picker widget."""

    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class Bounds:
    """Laid-out size of a widget; its hot region is [0, width) x [0, height)."""

    width: float = 0.0
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not (self.width > 0 and self.height > 0)

    def contains(self, x: float, y: float) -> bool:
        """Hit-test a local position against the hot region."""
        if self.is_empty:
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def normalize(self, x: float, y: float) -> tuple[float, float]:
        """Project a local position to (u, v) in [0, 1], pinning to the nearest edge."""
        if self.is_empty:
            return 0.0, 0.0
        return clamp_unit(x / self.width), clamp_unit(y / self.height)


class PointerTracker:
    """
    Press/drag/release tracking for one widget.

    `press` and `move` return the normalized coordinate to commit, or None
    when the event must be ignored (press outside the hot region, move
    while idle).
    """

    def __init__(self) -> None:
        self.state = DragState.IDLE

    @property
    def dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    def press(self, x: float, y: float, bounds: Bounds) -> Optional[tuple[float, float]]:
        """IDLE -> DRAGGING when the press lands inside `bounds`."""
        if not bounds.contains(x, y):
            return None
        self.state = DragState.DRAGGING
        return bounds.normalize(x, y)

    def move(self, x: float, y: float, bounds: Bounds) -> Optional[tuple[float, float]]:
        """DRAGGING -> DRAGGING wherever the pointer is; ignored while IDLE."""
        if self.state is not DragState.DRAGGING:
            return None
        return bounds.normalize(x, y)

    def release(self) -> None:
        """Any state -> IDLE."""
        self.state = DragState.IDLE

"""Domain events for observer pattern.

- Color events: The selected color changed
- Application events: Ephemeral presentation state changed
"""

from enum import Enum


class ColorEvent(Enum):
    """Events that change the selected color."""

    COMMITTED = "committed"  # A picker committed a color from pointer input
    PASTED = "pasted"        # A hex string replaced the color
    RESET = "reset"          # The color was replaced programmatically


class AppEvent(Enum):
    """Events for presentation state that is not part of the color."""

    THEME_CHANGED = "theme_changed"    # Dark/light theme swapped
    OUTPUT_CHANGED = "output_changed"  # Copyable text format changed

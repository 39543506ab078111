"""Enumerations for the color picker."""

from enum import Enum


class Theme(str, Enum):
    """Color theme of the picker window."""

    DARK = "dark"
    LIGHT = "light"

    def swap(self) -> "Theme":
        """Return the other theme."""
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class OutputFormat(str, Enum):
    """Text format used for the copyable color rows."""

    CSS = "css"          # hsl(305.9, 41%, 66.1%) / rgb(204, 133, 197) / #cc85c5
    LITERAL = "literal"  # hsl(305.9, 0.41, 0.66) / rgb(0.8, 0.52, 0.77) / hex("#cc85c5")

    def next(self) -> "OutputFormat":
        """Return the following format, wrapping around."""
        members = list(OutputFormat)
        return members[(members.index(self) + 1) % len(members)]


class PlaneStrategy(str, Enum):
    """How the saturation/value plane image is produced."""

    DYNAMIC = "dynamic"  # Re-synthesize every pixel on each hue change
    OVERLAY = "overlay"  # Static white/tint weights composited with the hue color

"""Color parsing exceptions.

- ColorParseError: Base class for text that cannot be turned into a color
- InvalidHexFormatError: Text is not '#' followed by exactly six hex digits
"""

from typing import Any

from .base import HexPickerError


class ColorParseError(HexPickerError):
    """Text could not be parsed into a color."""
    pass


class InvalidHexFormatError(ColorParseError):
    """Hex color string is malformed.

    Always recoverable: the caller keeps the color it already had.
    """

    def __init__(self, value: Any):
        """
        Initialize invalid hex format error.

        Args:
            value: The rejected input (kept verbatim for logging)
        """
        shown = value if isinstance(value, str) else type(value).__name__
        super().__init__(
            user_message=f"'{shown}' is not a hex color",
            technical_message=f"Invalid hex color format: {value!r}",
            recoverable=True,
            recovery_hint="Use '#' followed by six hex digits, for example #cc85c5",
        )
        self.value = value

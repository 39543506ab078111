"""Root of the hexpicker exception tree."""

from typing import Optional


class HexPickerError(Exception):
    """
    Base exception for hexpicker.

    `user_message` is what the TUI notification or CLI error box shows,
    `technical_message` goes to the log file. `recoverable` errors leave
    the picker state untouched, so the caller can keep going.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg

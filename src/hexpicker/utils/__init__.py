"""Generic utility modules for hexpicker.

- observer: Observer list management
- persistence: Pydantic model JSON persistence
- rounding: Display rounding and number formatting
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence
from .rounding import format_float, format_number, round_half_away

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
    "format_float",
    "format_number",
    "round_half_away",
]

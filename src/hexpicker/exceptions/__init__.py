"""
Custom exception hierarchy for hexpicker.

## Exception Hierarchy

```
HexPickerError (base)
├── ColorParseError
│   └── InvalidHexFormatError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry a `user_message` for display, a
`technical_message` for logs, a `recoverable` flag and an optional
`recovery_hint`.

### Example: Rejected hex paste

```python
from hexpicker.exceptions import InvalidHexFormatError

try:
    color = Color.from_hex(text)
except InvalidHexFormatError as e:
    logger.warning(e.technical_message)
    self.notify(e.get_full_message())   # prior color is kept
```

Out-of-range numbers are never errors: channels, hues and pointer
coordinates are clamped or wrapped silently.

See `hexpicker.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import HexPickerError
from .color import ColorParseError, InvalidHexFormatError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Color
    "ColorParseError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    "ErrorContext",
    # Base
    "HexPickerError",
    "InvalidHexFormatError",
    "format_error_for_display",
    # Handlers
    "handle_errors",
    "wrap_pydantic_error",
]

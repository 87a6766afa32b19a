"""
Custom exception hierarchy for colorstate.

## Exception Hierarchy

```
ColorStateError (base)
├── ColorParseError
│   └── HexParseError
├── PickerDisposedError
└── ConfigurationError
    ├── ConfigFileInvalidError
    ├── ConfigValidationError
    └── ConfigWriteError
```

## Usage

All custom exceptions inherit from `ColorStateError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Bad Hex Input

```python
from colorstate.exceptions import HexParseError

try:
    state = state.with_hex("#12345")
except HexParseError as e:
    # User sees: "Invalid hex color '#12345': expected 6 or 8 hex digits, got 5"
    show(e.get_full_message())
```

See `colorstate.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import ColorStateError
from .color import ColorParseError, HexParseError, PickerDisposedError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    ConfigWriteError,
)
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Color
    "ColorParseError",
    # Base
    "ColorStateError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigWriteError",
    # Config
    "ConfigurationError",
    "ErrorCollector",
    "ErrorContext",
    "HexParseError",
    "PickerDisposedError",
    "collect_errors",
    "format_error_for_display",
    # Handlers
    "handle_errors",
    "wrap_pydantic_error",
]

"""
Custom exception hierarchy for rkconfigurator.

## Exception Hierarchy

```
RkConfiguratorError (base)
├── EncodingError
│   ├── MissingCustomColorsError
│   └── MissingColorError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `RkConfiguratorError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Custom Mode Without Colors

```python
from rkconfigurator.exceptions import MissingCustomColorsError

raise MissingCustomColorsError(mode_bit=0, family="rgb")

# User sees: "Custom lighting mode needs per-key colors"
# Recovery hint: "Add a 'custom_colors' list to 'light_mode' ..."
```
"""

from .base import RkConfiguratorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .encoding import EncodingError, MissingColorError, MissingCustomColorsError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Encoding
    "EncodingError",
    "ErrorContext",
    "MissingColorError",
    "MissingCustomColorsError",
    # Base
    "RkConfiguratorError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]

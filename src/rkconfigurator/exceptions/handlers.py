"""
Centralized error handling utilities.

1. **Custom Exceptions** - Typed, user-friendly error classes (see base, encoding, config modules)
2. **Error Context** - Preserve technical details for logging, show friendly messages to users
3. **Recovery Hints** - Tell users what to do when things fail

## Quick Reference

| Scenario | Use This | Example |
|----------|----------|---------|
| Custom mode without colors | `MissingCustomColorsError` | `raise MissingCustomColorsError(0, "rgb")` |
| Config file syntax error | `ConfigFileInvalidError` | `raise ConfigFileInvalidError(path, "trailing comma")` |
| Config value invalid | `ConfigValidationError` | `raise ConfigValidationError("brightness", 300, "must be <= 255")` |

## Example: Config Validation

```python
from rkconfigurator.exceptions import wrap_pydantic_error

try:
    config = KeyboardConfig.model_validate_json(path.read_text())
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```
"""

import logging
from typing import Optional

from .base import RkConfiguratorError
from .config import ConfigFileInvalidError, ConfigValidationError, ConfigurationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("build frames", logger_instance=logger):
            frames = build_buffers(keyboard, config)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, RkConfiguratorError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> ConfigurationError:
    """
    Convert Pydantic validation errors to rkconfigurator exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    if isinstance(error, ValidationError):
        errors = error.errors()

        # Invalid syntax: Pydantic reports a single json_invalid error
        json_errors = [err for err in errors if err.get("type") == "json_invalid"]
        if json_errors:
            ctx = json_errors[0].get("ctx") or {}
            parse_error = str(ctx.get("error", json_errors[0].get("msg", "Invalid JSON")))
            return ConfigFileInvalidError(file_path, parse_error)

        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            reason = first_error.get("msg", "validation failed")
            value = first_error.get("input", None)

            return ConfigValidationError(
                field=field,
                value=value,
                error_msg=reason,
                file_path=file_path
            )

        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                msg = err.get("msg", "validation failed")
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=str(error),
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, RkConfiguratorError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None

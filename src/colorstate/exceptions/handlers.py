"""
Error handling helpers shared by the service and CLI layers.

How colorstate deals with failures:

1. **Typed exceptions** carry a user message, a technical message and a hint
2. **Logging** gets the technical message; users get the friendly one
3. **Isolation** keeps one bad hex value from aborting a batch

## Handling Patterns

| Pattern | Code |
|---------|------|
| Report and fall back | `@handle_errors(operation_name="parse hex", user_notification=show, re_raise=False)` |
| Log and re-raise | `@handle_errors(operation_name="load config")` |
| Batch with per-item errors | `collector = collect_errors("inspect"); with collector.try_operation(...): ...` |
| Logged block | `with ErrorContext("save config"): ...` |

## Example: Batch Parsing

```python
from colorstate.exceptions import collect_errors

collector = collect_errors("inspect colors")
for text in values:
    with collector.try_operation(f"parse {text}"):
        states.append(ColorState.from_hex(text))

if collector.has_errors:
    print(collector.get_summary())
```
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any, Optional, TypeVar

from pydantic import ValidationError

from .base import ColorStateError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator that logs failures of the wrapped call and optionally reports them.

    Args:
        operation_name: What the call does, for log lines ("parse hex")
        user_notification: Called with a display message when the call fails
        fallback_value: Returned instead of raising when re_raise is False
        re_raise: Propagate the exception after logging it
        log_level: Level used for the log record
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if isinstance(e, ColorStateError):
                    logger.log(log_level, f"Could not {operation_name}: {e.technical_message}")
                    message = e.get_full_message()
                else:
                    logger.log(log_level, f"Unexpected failure in {operation_name}: {e}", exc_info=True)
                    message = f"Error: {e}"

                if user_notification:
                    user_notification(message)
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager that logs how a block of work ended.

    The exception, if any, is kept on ``error``.

    Example:
        ```python
        with ErrorContext("save config", re_raise=False) as ctx:
            config.save(path)

        if ctx.error:
            print(f"Not saved: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self) -> "ErrorContext":
        self.logger.debug(f"Begin {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            self.logger.debug(f"Done {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, ColorStateError):
            self.logger.error(f"Could not {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Could not {self.operation}: {exc_val}", exc_info=True)

        # Returning True swallows the exception
        return not self.re_raise


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "config"


def wrap_pydantic_error(error: ValidationError, file_path: str) -> ColorStateError:
    """
    Turn a pydantic ValidationError into a configuration error.

    JSON syntax problems become ConfigFileInvalidError; value problems become
    ConfigValidationError naming the dotted field path (``bounds.max_hue``).
    Several value problems are folded into one error listing each field.

    Args:
        error: Raised by model_validate / model_validate_json
        file_path: Config file the data came from
    """
    details = error.errors()

    json_errors = [d for d in details if d.get("type") == "json_invalid"]
    if json_errors:
        reason = json_errors[0].get("ctx", {}).get("error") or json_errors[0].get("msg", str(error))
        return ConfigFileInvalidError(file_path, str(reason))

    if len(details) == 1:
        detail = details[0]
        return ConfigValidationError(
            field=_field_path(detail.get("loc", ())),
            value=detail.get("input"),
            error_msg=detail.get("msg", "validation failed"),
            file_path=file_path
        )

    lines = [f"  - {_field_path(d.get('loc', ()))}: {d.get('msg', 'validation failed')}" for d in details]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(details)} validation errors:\n" + "\n".join(lines),
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for showing an error to a user."""
    if isinstance(error, ColorStateError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """Start an ErrorCollector for a batch operation."""
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Runs a batch of sub-operations and records which ones failed.

    Only ColorStateError is recorded; any other exception is a bug and
    propagates.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, ColorStateError]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @contextmanager
    def try_operation(self, sub_operation: str) -> Iterator[None]:
        """Run one item of the batch, recording a ColorStateError instead of raising it."""
        try:
            yield
        except ColorStateError as e:
            self.errors.append((sub_operation, e))
            logger.debug(f"{self.operation}: {sub_operation} failed: {e.technical_message}")
        else:
            self.success_count += 1

    def get_summary(self) -> str:
        """Multi-line summary of the batch."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        lines = [f"Failed {self.error_count} of {total} operations:"]
        lines.extend(f"  - {sub_op}: {error.user_message}" for sub_op, error in self.errors)
        return "\n".join(lines)

"""Helpers that log a failed operation and turn it into something a user can read.

The TUI wraps its actions in `handle_errors` (see `hexpicker.tui.decorators`)
so a rejected hex paste becomes a notification and the current color stays.
The CLI opens its startup in an `ErrorContext` and prints
`format_error_for_display` output before exiting. Config loading passes
pydantic failures through `wrap_pydantic_error`.
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import HexPickerError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
) -> Callable:
    """
    Log failures of the decorated call and optionally report them.

    Recoverable hexpicker errors (bad user input) are logged as warnings,
    everything else as errors with a traceback.

    Args:
        operation_name: Verb phrase used in log lines, e.g. "apply hex color"
        user_notification: Called with a readable message on failure
        fallback_value: Returned instead of raising when re_raise is False
        re_raise: Propagate the exception after logging
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except HexPickerError as e:
                level = logging.WARNING if e.recoverable else logging.ERROR
                logger.log(level, f"Failed to {operation_name}: {e.technical_message}")
                if user_notification:
                    user_notification(e.get_full_message())
                if re_raise:
                    raise
                return fallback_value

            except Exception as e:
                logger.error(f"Unexpected error during {operation_name}: {e}", exc_info=True)
                if user_notification:
                    user_notification(f"Error: {e}")
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Log the start, end or failure of a block.

    With `re_raise=False` the exception is swallowed and kept on `error`.
    """

    def __init__(self, operation: str, re_raise: bool = True):
        self.operation = operation
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, HexPickerError):
            logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def _field_path(err: dict) -> str:
    return ".".join(str(loc) for loc in err.get('loc', ('unknown',)))


def wrap_pydantic_error(error: Exception, file_path: str) -> HexPickerError:
    """Map a failed `AppConfig` parse of `file_path` to a configuration error."""
    from pydantic import ValidationError

    error_msg = str(error)

    if "json_invalid" in error_msg or "Invalid JSON" in error_msg:
        # "Invalid JSON: <reason> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            error_msg = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        return ConfigFileInvalidError(file_path, error_msg)

    if isinstance(error, ValidationError) and error.errors():
        errors = error.errors()
        if len(errors) == 1:
            only = errors[0]
            return ConfigValidationError(
                field=_field_path(only),
                value=only.get('input'),
                error_msg=only.get('msg', 'validation failed'),
                file_path=file_path,
            )
        details = "\n".join(
            f"  - {_field_path(err)}: {err.get('msg', 'validation failed')}" for err in errors
        )
        return ConfigValidationError(
            field="multiple fields",
            value=None,
            error_msg=f"{len(errors)} validation errors:\n{details}",
            file_path=file_path,
        )

    return ConfigValidationError(field="unknown", value=None, error_msg=error_msg, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """(message, hint) for the CLI error box."""
    if isinstance(error, HexPickerError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None

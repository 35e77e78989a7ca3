"""
Centralized error handling utilities.

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Settings/config file has a syntax error | `ConfigFileInvalidError` |
| Settings/config value invalid | `ConfigValidationError` (via `wrap_pydantic_error`) |
| Option tree file unreadable | `OptionTreeFileError` |
| Option tree XML malformed | `OptionTreeParseError` |
| Curve point index out of range | `CurvePointIndexError` |

### Handling Patterns

| Pattern | Code |
|---------|------|
| Try several independent ops, collect errors | `collector = collect_errors("load trees"); with collector.try_operation(...): ...` |
| Show an error to the user | `message, hint = format_error_for_display(e)` |

## Example: loading one tree per device type

```python
from controlshaper.exceptions import collect_errors

collector = collect_errors("load option trees")
for device_type in DeviceType:
    with collector.try_operation(f"load {device_type.value}"):
        trees[device_type] = parse_tree(device_type)

if collector.has_errors:
    logger.warning(collector.get_summary())
```

One device type failing to load is recorded and the loop continues with the
others.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from .base import ControlShaperError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> ControlShaperError:
    """
    Convert Pydantic validation errors to controlshaper exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON syntax, as opposed to valid JSON with bad values
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            if len(errors) == 1:
                first_error = errors[0]
                field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
                reason = first_error.get('msg', 'validation failed')
                value = first_error.get('input', None)

                return ConfigValidationError(
                    field=field,
                    value=value,
                    error_msg=reason,
                    file_path=file_path
                )
            else:
                error_lines = []
                for err in errors:
                    field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                    msg = err.get('msg', 'validation failed')
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
        error_msg=error_msg,
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
    if isinstance(error, ControlShaperError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Args:
        operation: Description of the overall operation

    Returns:
        ErrorCollector instance
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        """
        Initialize error collector.

        Args:
            operation: Description of the overall operation
        """
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get number of errors collected."""
        return len(self.errors)

    @contextmanager
    def try_operation(self, sub_operation: str) -> Iterator[None]:
        """
        Attempt one step of the batch, recording its error instead of raising.

        Args:
            sub_operation: Description of this step
        """
        try:
            yield
            self.success_count += 1
        except Exception as e:
            if isinstance(e, ControlShaperError):
                logger.warning(f"Failed to {sub_operation}: {e.technical_message}")
            else:
                logger.warning(f"Failed to {sub_operation}: {e}", exc_info=True)
            self.errors.append((sub_operation, e))

    def get_summary(self) -> str:
        """Get a summary message of all failures."""
        if not self.has_errors:
            return f"{self.operation}: all {self.success_count} succeeded"

        lines = [f"{self.operation}: {self.error_count} failed, {self.success_count} succeeded"]
        for sub_operation, error in self.errors:
            message, _ = format_error_for_display(error)
            lines.append(f"  - {sub_operation}: {message}")
        return "\n".join(lines)

"""
Custom exception hierarchy for controlshaper.

## Exception Hierarchy

```
ControlShaperError (base)
├── OptionTreeError
│   ├── OptionTreeFileError
│   ├── OptionTreeParseError
│   └── MissingOptionTreeError
├── CurvePointIndexError (also an IndexError)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ControlShaperError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

Lookups that fail (an unknown option path, an unknown preset name) are not
errors: they return None or leave the curve untouched.

See `controlshaper.exceptions.handlers` for utilities to handle these
exceptions systematically.
"""

from .base import ControlShaperError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .curve import CurvePointIndexError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .tree import (
    MissingOptionTreeError,
    OptionTreeError,
    OptionTreeFileError,
    OptionTreeParseError,
)

__all__ = [
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    # Base
    "ControlShaperError",
    # Curves
    "CurvePointIndexError",
    "ErrorCollector",
    # Option trees
    "MissingOptionTreeError",
    "OptionTreeError",
    "OptionTreeFileError",
    "OptionTreeParseError",
    # Handlers
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]

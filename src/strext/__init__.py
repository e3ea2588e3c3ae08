"""strext - string validation and truncation helpers."""

from strext.exceptions import InvalidArgumentError, StrextError
from strext.text import (
    ELLIPSIS,
    is_numeric,
    is_valid_email,
    is_valid_url,
    remove_special_characters,
    to_title_case,
    truncate,
    truncate_with_ellipsis,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Errors
    "StrextError",
    "InvalidArgumentError",
    # Truncation
    "ELLIPSIS",
    "truncate",
    "truncate_with_ellipsis",
    # Validation
    "is_valid_email",
    "is_valid_url",
    "is_numeric",
    # Formatting
    "to_title_case",
    "remove_special_characters",
]

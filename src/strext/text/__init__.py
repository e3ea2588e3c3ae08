"""Text helpers for strext."""

from strext.text.formatting import remove_special_characters, to_title_case
from strext.text.truncation import ELLIPSIS, truncate, truncate_with_ellipsis
from strext.text.validation import is_numeric, is_valid_email, is_valid_url

__all__ = [
    "ELLIPSIS",
    "truncate",
    "truncate_with_ellipsis",
    "is_valid_email",
    "is_valid_url",
    "is_numeric",
    "to_title_case",
    "remove_special_characters",
]

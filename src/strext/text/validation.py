"""Validity checks for emails, URLs and numeric strings."""

import re
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import HttpUrl, TypeAdapter, ValidationError

from strext.utils.logging import get_logger

logger = get_logger(__name__)

_HTTP_URL_ADAPTER = TypeAdapter(HttpUrl)

# Special values accepted alongside ordinary numbers
SPECIAL_NUMBER_PATTERN = re.compile(r"^(?:NaN|[+-]?Infinity)$")


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def is_valid_email(email: Optional[str]) -> bool:
    """Check whether the string is a single, bare email address.

    Deliverability (DNS) is never checked. Display-name forms such as
    "Name <user@example.com>" are rejected.

    Args:
        email: Candidate address.

    Returns:
        True if email parses as an address and nothing else.
    """
    if _is_blank(email):
        return False

    if email != email.strip():
        return False

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug(f"Rejected email {email!r}: {e}")
        return False

    return True


def is_valid_url(url: Optional[str]) -> bool:
    """Check whether the string is an absolute http or https URL.

    Args:
        url: Candidate URL.

    Returns:
        True if url parses as an absolute http(s) URL.
    """
    if _is_blank(url):
        return False

    try:
        parsed = _HTTP_URL_ADAPTER.validate_python(url)
    except ValidationError as e:
        logger.debug(f"Rejected URL {url!r}: {e.errors()[0]['msg']}")
        return False

    return parsed.scheme in ("http", "https")


def is_numeric(text: Optional[str]) -> bool:
    """Check whether the string represents a number.

    Accepts surrounding whitespace, a sign, decimals, exponents, comma
    thousands separators, accounting-style parentheses and NaN/Infinity.

    Args:
        text: Candidate numeric string.

    Returns:
        True if text parses as a floating-point value.

    Example:
        >>> is_numeric("-1,234.5")
        True
        >>> is_numeric("abc123")
        False
    """
    if _is_blank(text):
        return False

    candidate = text.strip()

    # Non-ASCII digits and underscore grouping are Python-only forms
    if not candidate.isascii() or "_" in candidate:
        return False

    if SPECIAL_NUMBER_PATTERN.match(candidate):
        return True

    # Letters other than an exponent marker would let float() read inf/nan
    if any(c.isalpha() and c not in "eE" for c in candidate):
        return False

    if candidate.startswith("(") and candidate.endswith(")"):
        candidate = candidate[1:-1]

    # Thousands separators are only legal before the decimal point
    integer_part, dot, fraction = candidate.partition(".")
    candidate = integer_part.replace(",", "") + dot + fraction

    try:
        float(candidate)
    except ValueError:
        logger.debug(f"Rejected number {text!r}")
        return False

    return True

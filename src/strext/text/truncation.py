"""Length truncation, plain and ellipsis-suffixed."""

from typing import Optional

from strext.exceptions import InvalidArgumentError

ELLIPSIS = "..."

# Lowest accepted max_length for each truncation mode
MIN_PLAIN_LENGTH = 0
MIN_ELLIPSIS_LENGTH = 3


def _bounded_prefix(text: Optional[str], max_length: int, suffix: str) -> Optional[str]:
    """Cut text so that the prefix plus suffix fits in max_length.

    Text that already fits is returned untouched, without the suffix.
    """
    if text is None:
        return None
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def truncate(text: Optional[str], max_length: int) -> Optional[str]:
    """Truncate text to at most max_length characters.

    Args:
        text: Text to truncate. None is passed through.
        max_length: Maximum number of characters to keep.

    Returns:
        The original text if it fits, otherwise its first max_length
        characters. None if text is None.

    Raises:
        InvalidArgumentError: If max_length is negative, even for None text.

    Example:
        >>> truncate("This is a long string", 9)
        'This is a'
    """
    if max_length < MIN_PLAIN_LENGTH:
        raise InvalidArgumentError("Max length cannot be negative.", "max_length")

    if text is not None and max_length == 0:
        return ""

    return _bounded_prefix(text, max_length, "")


def truncate_with_ellipsis(text: Optional[str], max_length: int) -> Optional[str]:
    """Truncate text to max_length characters, ending in an ellipsis.

    The three dots count towards max_length, so a truncated result is
    always exactly max_length characters long.

    Args:
        text: Text to truncate. None is passed through.
        max_length: Maximum length including the ellipsis.

    Returns:
        The original text if it fits, otherwise the first
        max_length - 3 characters followed by "...". None if text is None.

    Raises:
        InvalidArgumentError: If max_length is below 3, even for None text.

    Example:
        >>> truncate_with_ellipsis("Hello World", 8)
        'Hello...'
    """
    if max_length < MIN_ELLIPSIS_LENGTH:
        raise InvalidArgumentError(
            "Max length must be at least 3 to accommodate ellipsis.", "max_length"
        )

    return _bounded_prefix(text, max_length, ELLIPSIS)

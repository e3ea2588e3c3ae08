"""Casing and character filtering."""

import re
from typing import Optional

# Letters and digits, optionally joined by apostrophes ("don't" is one word)
WORD_PATTERN = re.compile(r"[^\W_](?:[^\W_]|')*")

# Anything that is not an ASCII letter, digit or whitespace
SPECIAL_CHARACTER_PATTERN = re.compile(r"[^a-zA-Z0-9\s]")


def _capitalize_word(match: re.Match) -> str:
    word = match.group(0)
    first = word[0].title()
    # Mappings that expand ("ß" -> "Ss") would change the text length
    if len(first) != 1:
        return word
    return first + word[1:]


def to_title_case(text: Optional[str]) -> Optional[str]:
    """Convert text to Title Case.

    The text is lower-cased first, so "hELLo WoRLd" becomes "Hello World".
    Digits belong to the word they touch: "abc123def" becomes "Abc123def".

    Args:
        text: Text to convert.

    Returns:
        Title-cased text, or None if text is None.
    """
    if not text:
        return text

    return WORD_PATTERN.sub(_capitalize_word, text.lower())


def remove_special_characters(text: Optional[str]) -> Optional[str]:
    """Strip everything except ASCII letters, digits and whitespace."""
    if text is None:
        return None
    return SPECIAL_CHARACTER_PATTERN.sub("", text)

"""
Text utilities for label extraction.

Handles tokenization and boilerplate detection.
"""
import re
import string
from typing import List

# Whitespace or any ASCII punctuation character
_TOKEN_SEPARATOR = re.compile(r'[\s' + re.escape(string.punctuation) + r']')


def is_punctuation(token: str) -> bool:
    """Check whether a token is empty or made only of ASCII punctuation."""
    return all(c in string.punctuation for c in token)


def split_words(text: str) -> List[str]:
    """
    Split text into lower-cased words.

    Splits on whitespace and ASCII punctuation, then drops empty and
    punctuation-only pieces.

    Args:
        text: Raw description

    Returns:
        List of lower-cased words
    """
    return [
        token.lower()
        for token in _TOKEN_SEPARATOR.split(text)
        if not is_punctuation(token)
    ]


def is_boilerplate(text: str) -> bool:
    """
    Check whether text is made only of uppercase letters and digits.

    Stamped codes and printed headings on the label look like this. The
    empty string counts as boilerplate.
    """
    return all(c.isupper() or c.isnumeric() for c in text)


def join_descriptions(first: str, second: str, separator: str = " ") -> str:
    """Concatenate two descriptions with the given separator."""
    return f"{first}{separator}{second}"

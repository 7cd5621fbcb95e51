"""
Text Utilities

Helper functions for text processing used by brand matching.
"""

import hashlib
import unicodedata
from typing import List


def strip_accents(text: str) -> str:
    """
    Remove accents and diacritic marks from text.

    Args:
        text: Text that may contain accented characters

    Returns:
        Text with combining marks removed

    Example:
        >>> strip_accents("Laboratoires Vichy Thermal Eau Pré")
        'Laboratoires Vichy Thermal Eau Pre'
    """
    if not text:
        return text

    decomposed = unicodedata.normalize('NFKD', text)
    return ''.join(c for c in decomposed if not unicodedata.combining(c))


def get_words(text: str) -> List[str]:
    """Split text into whitespace-delimited words."""
    return text.split() if text else []


def string_to_hash(value: str) -> str:
    """
    Build a stable identifier from a composite key.

    Args:
        value: Composite key (e.g., "benu_bg_12345")

    Returns:
        Hex digest, identical across runs for the same input
    """
    return hashlib.md5(value.encode('utf-8')).hexdigest()

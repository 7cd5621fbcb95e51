"""
Term Boundary Test

A brand only counts as mentioned in a title when it appears as a whole
word, never as part of a larger word ("Tylenol" is not in "Tylenolol").
"""

import re
from functools import lru_cache
from typing import Optional, Tuple


@lru_cache(maxsize=4096)
def _brand_patterns(brand: str) -> Tuple[re.Pattern, re.Pattern]:
    escaped = re.escape(brand)
    # Leading word, trailing word, or whitespace on both sides
    whitespace_bounded = re.compile(rf'(?:^|\s){escaped}(?:\s|$)', re.IGNORECASE)
    word_bounded = re.compile(rf'\b{escaped}\b', re.IGNORECASE)
    return whitespace_bounded, word_bounded


def is_separate_term(title: Optional[str], brand: str) -> bool:
    """
    Check whether a brand occurs in a title as a separate term.

    Args:
        title: Product title (None is treated as empty)
        brand: Brand name; regex metacharacters are matched literally

    Returns:
        True if the brand is a whole word of the title (case-insensitive)

    Example:
        >>> is_separate_term("Tylenol Extra", "Tylenol")
        True
        >>> is_separate_term("Tylenolol", "Tylenol")
        False
    """
    if not title or not brand:
        return False

    whitespace_bounded, word_bounded = _brand_patterns(brand)
    return bool(whitespace_bounded.search(title) or word_bounded.search(title))

"""
Word lists that gate brand candidates.

Loaded once per run from config/word_lists.yaml and passed to
BrandAssigner explicitly, so tests can use their own lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List, Optional

from ..common.config_loader import load_word_lists_config


def _as_words(words: Iterable[Any], list_name: str) -> List[str]:
    """
    Turn YAML list entries into stripped, non-empty strings.

    Unquoted ON/OFF/YES/NO load as booleans, which would otherwise
    crash or silently vanish from the list.
    """
    result = []
    for word in words:
        if isinstance(word, bool):
            raise ValueError(
                f"{list_name}: got boolean {word!r}; quote the word in the YAML file "
                f"(e.g. - \"ON\")"
            )
        if word is None:
            continue
        text = str(word).strip()
        if text:
            result.append(text)
    return result


@dataclass(frozen=True)
class WordLists:
    """
    Immutable matching configuration.

    Attributes:
        ignore: Brand names never assigned (upper-case)
        front_words: Brands accepted only if the title starts with a front word
        front_or_second_words: Brands accepted if the title starts with, or
            has as second word, one of these words
        capitalized: Brand that must appear in this exact casing when the
            title contains it in another case
    """
    ignore: FrozenSet[str] = frozenset()
    front_words: FrozenSet[str] = frozenset()
    front_or_second_words: FrozenSet[str] = frozenset()
    capitalized: str = ""

    @classmethod
    def create(
        cls,
        ignore: Iterable[str] = (),
        front_words: Iterable[str] = (),
        front_or_second_words: Iterable[str] = (),
        capitalized: Optional[str] = None,
    ) -> "WordLists":
        """Build word lists, normalizing case for each list."""
        return cls(
            ignore=frozenset(w.upper() for w in _as_words(ignore, "words_to_ignore")),
            front_words=frozenset(w.lower() for w in _as_words(front_words, "front_words")),
            front_or_second_words=frozenset(
                w.lower() for w in _as_words(front_or_second_words, "front_or_second_words")
            ),
            capitalized="".join(_as_words([capitalized], "capitalized")),
        )

    @property
    def positional(self) -> FrozenSet[str]:
        """Every brand subject to the positional gate."""
        return self.front_words | self.front_or_second_words


def load_word_lists() -> WordLists:
    """Load word lists from config/word_lists.yaml."""
    config = load_word_lists_config()
    return WordLists.create(
        ignore=config['words_to_ignore'],
        front_words=config['front_words'],
        front_or_second_words=config['front_or_second_words'],
        capitalized=config['capitalized'],
    )

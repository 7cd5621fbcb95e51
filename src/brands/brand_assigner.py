"""
Brand Assigner

Detects which known brand a product title refers to, using the brand
equivalence mapping as the vocabulary:

1. Scan every brand of every equivalence class
2. Drop ignored brands and brands that are not a separate term of the title
3. Apply the capitalized-brand guard and the positional gate
4. Order the survivors by where they first occur in the title

The first survivor is the assigned brand; all survivors are kept for auditing.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..common.text_utils import get_words, string_to_hash, strip_accents
from ..models import MatchResult, Product
from .term_matcher import is_separate_term
from .word_lists import WordLists

logger = logging.getLogger(__name__)

NOT_FOUND = float('inf')


def build_product_key(source: str, country: str, source_id: str) -> str:
    """Composite key identifying a product within a source and country."""
    return f"{source}_{country}_{source_id}"


def sort_by_occurrence(candidates: Sequence[str], title: str) -> List[str]:
    """
    Order candidates by their first position in the title.

    Matching ignores case and accents; candidates not found in the
    title go last, keeping their scan order.

    Example:
        >>> sort_by_occurrence(["advil", "bayer"], "Bayer Aspirin Advil")
        ['bayer', 'advil']
    """
    haystack = strip_accents(title or "").lower()

    def position(candidate: str) -> float:
        index = haystack.find(candidate.lower())
        return index if index >= 0 else NOT_FOUND

    return sorted(candidates, key=position)


class BrandAssigner:
    """
    Assigns at most one brand per product title.

    Usage:
        assigner = BrandAssigner(mapping, word_lists)
        result = assigner.assign(product, source="benu", country="bg")
        # result.assigned_brand -> "bayer"
    """

    def __init__(
        self,
        mapping: Dict[str, List[str]],
        word_lists: Optional[WordLists] = None,
        hash_key: Callable[[str], str] = string_to_hash,
    ):
        """
        Initialize the assigner.

        Args:
            mapping: Brand equivalence mapping (read-only)
            word_lists: Gating word lists; empty lists if None
            hash_key: Turns the composite product key into the output key
        """
        self.mapping = mapping
        self.word_lists = word_lists or WordLists()
        self.hash_key = hash_key

    def _passes_capitalized_guard(self, title: str, brand: str) -> bool:
        """Reject the capitalized brand when the title only has it in another case."""
        capitalized = self.word_lists.capitalized
        if not capitalized or brand.lower() != capitalized.lower():
            return True
        if capitalized.upper() in title.upper() and capitalized not in title:
            logger.debug("'%s' only present in another case in %r", brand, title)
            return False
        return True

    def _passes_positional_gate(self, title: str, brand: str) -> bool:
        """Brands in the positional lists must sit at the start of the title."""
        if brand.lower() not in self.word_lists.positional:
            return True

        title_lower = title.lower()
        if any(title_lower.startswith(word) for word in self.word_lists.front_words):
            return True
        if any(title_lower.startswith(word) for word in self.word_lists.front_or_second_words):
            return True

        words = get_words(title_lower)
        return len(words) > 1 and words[1] in self.word_lists.front_or_second_words

    def find_candidates(self, title: Optional[str]) -> List[str]:
        """
        Collect every brand from the mapping that the title refers to.

        Args:
            title: Product title (None is treated as empty)

        Returns:
            Accent-stripped candidates without duplicates, ordered by
            first occurrence in the title
        """
        title = title or ""
        if not title:
            return []

        candidates: List[str] = []
        for related in self.mapping.values():
            for brand in related:
                stored = strip_accents(brand)
                if stored in candidates or brand.upper() in self.word_lists.ignore:
                    continue
                if not is_separate_term(title, brand):
                    continue
                if not self._passes_capitalized_guard(title, brand):
                    continue
                if not self._passes_positional_gate(title, brand):
                    continue
                candidates.append(stored)

        if len(candidates) > 1:
            candidates = sort_by_occurrence(candidates, title)
        return candidates

    def match(self, title: Optional[str]) -> Optional[str]:
        """Return the brand a title refers to, or None."""
        candidates = self.find_candidates(title)
        return candidates[0] if candidates else None

    def assign(self, product: Product, source: str, country: str) -> MatchResult:
        """
        Assign a brand to one product.

        Args:
            product: Product to match (existing brand is not checked here)
            source: Source identifier, part of the result key
            country: Country code, part of the result key

        Returns:
            MatchResult with the chosen brand (or None) and all candidates
        """
        title = product.title or ""
        candidates = self.find_candidates(title)
        brand = candidates[0] if candidates else None

        key = self.hash_key(build_product_key(source, country, product.source_id))
        if len(candidates) > 1:
            logger.debug("Ambiguous title %r: %s -> %s", title, candidates, brand)

        return MatchResult(
            key=key,
            title=title,
            assigned_brand=brand,
            all_candidates=candidates,
        )

    def assign_all(
        self,
        products: Iterable[Product],
        source: str,
        country: str,
    ) -> List[MatchResult]:
        """
        Assign brands to every product that has none yet.

        Products with an existing brand are skipped and produce no result.
        """
        results = []
        skipped = 0
        for product in products:
            if product.has_brand:
                skipped += 1
                continue
            results.append(self.assign(product, source, country))

        matched = sum(1 for r in results if r.assigned_brand)
        logger.info(
            "%s/%s: %d products matched, %d unmatched, %d already assigned",
            source, country, matched, len(results) - matched, skipped,
        )
        return results


def assign_brand(
    product: Product,
    mapping: Dict[str, List[str]],
    word_lists: Optional[WordLists] = None,
    source: str = "",
    country: str = "",
) -> MatchResult:
    """Assign a brand to a single product with a throwaway BrandAssigner."""
    return BrandAssigner(mapping, word_lists).assign(product, source, country)

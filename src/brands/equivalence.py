"""
Brand Equivalence Classes

Turns pairwise "brand A relates to brands B;C" records into disjoint
equivalence classes (connected components of the relation graph):

1. Build an undirected adjacency map, lower-casing every name
2. Walk each node's component with an explicit stack
3. Keep one key per distinct component (first seen wins)

The resulting mapping is what BrandAssigner scans for candidate brands.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from ..models import RelationRecord

logger = logging.getLogger(__name__)

SECONDARY_SEPARATOR = ';'

BrandMapping = Dict[str, List[str]]


class MalformedRelationError(ValueError):
    """Raised in strict mode when a relation record cannot be used."""


def parse_secondaries(secondaries: str) -> List[str]:
    """
    Split a ';'-separated secondaries field into lower-case names.

    Example:
        >>> parse_secondaries("Aspirin; Rexall ;")
        ['aspirin', 'rexall']
    """
    names = []
    for token in secondaries.split(SECONDARY_SEPARATOR):
        name = token.strip().lower()
        if name:
            names.append(name)
    return names


def related_brands(adjacency: Dict[str, Set[str]], brand: str) -> Set[str]:
    """
    Collect every brand reachable from `brand` through relation edges.

    Since edges are symmetric, any brand with at least one relation
    reaches itself through a neighbour and is part of its own class.
    """
    related: Set[str] = set()
    stack = [brand]
    while stack:
        current = stack.pop()
        for neighbour in adjacency.get(current, ()):
            if neighbour not in related:
                related.add(neighbour)
                stack.append(neighbour)
    return related


def unique_classes(mapping: BrandMapping) -> BrandMapping:
    """
    Drop keys whose class is identical to one already kept.

    Keys are processed in mapping order; the first key for each distinct
    class survives. Values come back sorted.
    """
    seen: Set[tuple] = set()
    unique: BrandMapping = {}

    for brand, related in mapping.items():
        canonical = tuple(sorted(related))
        if canonical in seen:
            continue
        seen.add(canonical)
        unique[brand] = list(canonical)

    return unique


class EquivalenceClassBuilder:
    """
    Builds the brand equivalence mapping from relation records.

    Usage:
        builder = EquivalenceClassBuilder()
        builder.add_all(records)
        mapping = builder.build()
        # {"bayer": ["aspirin", "bayer", "rexall"], ...}
    """

    def __init__(self, strict: bool = False):
        """
        Initialize the builder.

        Args:
            strict: If True, a malformed record raises
                MalformedRelationError instead of being skipped.
        """
        self.strict = strict
        # node -> neighbours; dict order is first-seen order
        self.adjacency: Dict[str, Set[str]] = {}
        self.skipped = 0

    def _malformed(self, record: RelationRecord, reason: str) -> None:
        if self.strict:
            raise MalformedRelationError(f"Malformed relation {record!r}: {reason}")
        self.skipped += 1
        logger.warning("Skipping relation %r: %s", record, reason)

    def _ensure_node(self, name: str) -> Set[str]:
        return self.adjacency.setdefault(name, set())

    def add(self, record: RelationRecord) -> bool:
        """
        Add one relation record's edges to the graph.

        Returns:
            True if the record contributed edges, False if it was skipped
        """
        primary = record.primary.strip().lower() if isinstance(record.primary, str) else ''
        if not primary:
            self._malformed(record, "missing primary")
            return False

        if not isinstance(record.secondaries, str):
            self._malformed(record, "missing secondaries")
            return False

        secondaries = parse_secondaries(record.secondaries)
        if not secondaries:
            self._malformed(record, "no secondary names")
            return False

        primary_neighbours = self._ensure_node(primary)
        for secondary in secondaries:
            self._ensure_node(secondary).add(primary)
            primary_neighbours.add(secondary)

        return True

    def add_all(self, records: Iterable[RelationRecord]) -> int:
        """Add every record; return how many contributed edges."""
        return sum(1 for record in records if self.add(record))

    def components(self) -> Dict[str, Set[str]]:
        """Map every node to its full equivalence class (not deduplicated)."""
        return {
            brand: related_brands(self.adjacency, brand)
            for brand in self.adjacency
        }

    def class_of(self, brand: str) -> Set[str]:
        """Equivalence class of a single brand (case-insensitive lookup)."""
        return related_brands(self.adjacency, brand.strip().lower())

    def build(self) -> BrandMapping:
        """Build the deduplicated brand -> sorted related brands mapping."""
        mapping = unique_classes(self.components())
        logger.info(
            "Built %d brand classes from %d brands (%d relations skipped)",
            len(mapping), len(self.adjacency), self.skipped,
        )
        return mapping


def build_adjacency(relations: Iterable[RelationRecord], strict: bool = False) -> Dict[str, Set[str]]:
    """Build the undirected relation graph as an adjacency map."""
    builder = EquivalenceClassBuilder(strict=strict)
    builder.add_all(relations)
    return builder.adjacency


def build_brand_mapping(
    relations: Iterable[RelationRecord],
    strict: bool = False,
) -> BrandMapping:
    """
    Build the brand equivalence mapping from relation records.

    Args:
        relations: Relation records (primary, ';'-separated secondaries)
        strict: Fail on malformed records instead of skipping them

    Returns:
        Mapping of lower-case brand -> sorted list of its class members,
        with one key per distinct class
    """
    builder = EquivalenceClassBuilder(strict=strict)
    builder.add_all(relations)
    return builder.build()

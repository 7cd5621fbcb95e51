"""
Brand assignment run

Glue between storage and the matching core: load relations and
products, build the equivalence mapping, assign brands, write results.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..common.config_loader import load_matching_settings
from .brand_assigner import BrandAssigner
from .equivalence import build_brand_mapping
from .storage import load_products, load_relations, write_results
from .word_lists import WordLists, load_word_lists

logger = logging.getLogger(__name__)


@dataclass
class AssignmentSummary:
    """Counts for one (source, country) run."""
    source: str
    country: str
    total: int = 0
    skipped: int = 0
    matched: int = 0
    unmatched: int = 0
    output_path: Optional[Path] = None
    brands: Counter = field(default_factory=Counter)


def resolve_products_path(template: str, source: str, country: str) -> str:
    """Fill {source}/{country} placeholders of the products path setting."""
    return template.format(source=source, country=country)


def load_brand_mapping(
    relations_path: Optional[str] = None,
    strict: bool = False,
    settings: Optional[Dict[str, Any]] = None,
) -> Dict[str, List[str]]:
    """Load relation records and build the deduplicated brand mapping."""
    if relations_path is None:
        settings = settings if settings is not None else load_matching_settings()
        relations_path = settings['relations_file']
    return build_brand_mapping(load_relations(relations_path), strict=strict)


def assign_brands(
    source: str,
    country: str,
    relations_path: Optional[str] = None,
    products_path: Optional[str] = None,
    output_dir: Optional[str] = None,
    mapping: Optional[Dict[str, List[str]]] = None,
    word_lists: Optional[WordLists] = None,
    strict: bool = False,
) -> AssignmentSummary:
    """
    Assign brands to every unassigned product of one source and country.

    Args:
        source: Product source identifier (e.g., "benu")
        country: Country code (e.g., "bg")
        relations_path: Relation records file (default from settings)
        products_path: Products file (default from settings)
        output_dir: Results directory (default from settings)
        mapping: Pre-built brand mapping, reused across runs
        word_lists: Gating word lists (default from config)
        strict: Fail on malformed relation records

    Returns:
        AssignmentSummary with counts and the written file path
    """
    settings: Dict[str, Any] = {}
    if relations_path is None or products_path is None or output_dir is None:
        settings = load_matching_settings()

    if mapping is None:
        mapping = load_brand_mapping(relations_path, strict=strict, settings=settings)
    if word_lists is None:
        word_lists = load_word_lists()
    if products_path is None:
        products_path = resolve_products_path(settings['products_file'], source, country)
    if output_dir is None:
        output_dir = settings.get('output_dir', 'output')

    products = load_products(products_path)
    assigner = BrandAssigner(mapping, word_lists)
    results = assigner.assign_all(products, source, country)

    summary = AssignmentSummary(source=source, country=country, total=len(products))
    summary.skipped = len(products) - len(results)
    for result in results:
        if result.assigned_brand:
            summary.matched += 1
            summary.brands[result.assigned_brand] += 1
        else:
            summary.unmatched += 1

    summary.output_path = write_results(results, source, country, output_dir)
    return summary

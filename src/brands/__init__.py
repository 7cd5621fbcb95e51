"""
Brand clustering and assignment.

Modules:
    equivalence - Build brand equivalence classes from relation records
    term_matcher - Whole-word brand test for product titles
    word_lists - Ignore and positional word lists
    brand_assigner - Pick the brand a product title refers to
    storage - Load relations/products, write results
    pipeline - One assignment run per (source, country)
"""

from .brand_assigner import BrandAssigner, assign_brand, build_product_key, sort_by_occurrence
from .equivalence import (
    EquivalenceClassBuilder,
    MalformedRelationError,
    build_adjacency,
    build_brand_mapping,
    related_brands,
    unique_classes,
)
from .pipeline import AssignmentSummary, assign_brands, load_brand_mapping
from .storage import ResultsWriteError, load_products, load_relations, write_results
from .term_matcher import is_separate_term
from .word_lists import WordLists, load_word_lists

__all__ = [
    # Equivalence classes
    'EquivalenceClassBuilder',
    'MalformedRelationError',
    'build_adjacency',
    'build_brand_mapping',
    'related_brands',
    'unique_classes',
    # Matching
    'is_separate_term',
    'WordLists',
    'load_word_lists',
    'BrandAssigner',
    'assign_brand',
    'build_product_key',
    'sort_by_occurrence',
    # Storage and runs
    'load_relations',
    'load_products',
    'write_results',
    'ResultsWriteError',
    'AssignmentSummary',
    'assign_brands',
    'load_brand_mapping',
]

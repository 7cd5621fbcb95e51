"""Shared test fixtures."""

import pytest

from src.brands import WordLists, build_brand_mapping
from src.models import Product, RelationRecord


@pytest.fixture
def sample_relations():
    """Relation records covering transitive links and messy secondaries."""
    return [
        RelationRecord("Bayer", "Aspirin;Rennie"),
        RelationRecord("Rennie", " Bepanthen ; "),
        RelationRecord("Sanofi", "Essentiale;Magne B6"),
        RelationRecord("La Roche-Posay", "Vichy;L'Oréal"),
        RelationRecord("Johnson & Johnson", "Tylenol"),
    ]


@pytest.fixture
def sample_mapping(sample_relations):
    """Deduplicated brand mapping built from sample_relations."""
    return build_brand_mapping(sample_relations)


@pytest.fixture
def sample_word_lists():
    """Small word lists for BrandAssigner tests (no config I/O)."""
    return WordLists.create(
        ignore=["PLUS", "FORTE"],
        front_words=["vita"],
        front_or_second_words=["kids"],
        capitalized="NOW",
    )


@pytest.fixture
def unassigned_product():
    """Product without a prior brand assignment."""
    return Product(title="Bayer Aspirin 500mg x 20", source_id="1001")


@pytest.fixture
def assigned_product():
    """Product already mapped to a brand."""
    return Product(title="Tylenol Extra Strength", source_id="1002", existing_brand_id="77")

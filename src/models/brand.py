"""
Brand matching data models.

Pure data classes for relation records, catalog products and match
results. No business logic beyond serialization helpers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RelationRecord:
    """
    One "brand relates to brands" row.

    `secondaries` is the raw ';'-separated list of alternate names,
    exactly as stored. Either field may be None for malformed rows.
    """
    primary: Optional[str]
    secondaries: Optional[str]

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "RelationRecord":
        """Build a record from a stored row (manufacturer_p1 / manufacturers_p2)."""
        return cls(
            primary=row.get('manufacturer_p1'),
            secondaries=row.get('manufacturers_p2'),
        )


@dataclass
class Product:
    """Catalog product as seen by the brand assigner."""
    title: Optional[str]
    source_id: str
    existing_brand_id: Optional[str] = None

    @property
    def has_brand(self) -> bool:
        """True if the product was already mapped to a brand."""
        return self.existing_brand_id not in (None, '')

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Product":
        """Build a product from a stored row (title / source_id / m_id; falsy m_id is unset)."""
        existing = row.get('m_id')
        return cls(
            title=row.get('title'),
            source_id=str(row.get('source_id', '')),
            existing_brand_id=str(existing) if existing else None,
        )


@dataclass
class MatchResult:
    """
    Outcome of brand assignment for one product.

    Written once to the output sink, never mutated afterwards.
    """
    key: str
    title: str
    assigned_brand: Optional[str]
    all_candidates: List[str] = field(default_factory=list)

    @property
    def data(self) -> str:
        """Human-readable audit string: title and every candidate."""
        return f"{self.title} -> {','.join(self.all_candidates)}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the stable output field names."""
        return {
            'key': self.key,
            'brand': self.assigned_brand,
            'data': self.data,
        }

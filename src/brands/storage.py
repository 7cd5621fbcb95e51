"""
Brand matching storage

Loads relation records and catalog products from JSON or CSV files and
writes match results as a JSON array per (source, country).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ..common.csv_utils import read_csv
from ..models import MatchResult, Product, RelationRecord

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ('.json', '.csv')


class ResultsWriteError(OSError):
    """Raised when match results cannot be persisted."""


def _read_rows(path: str | Path) -> List[Dict[str, Any]]:
    """Read a JSON array or CSV file into a list of row dicts."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == '.csv':
        return list(read_csv(path))
    if suffix == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"Expected a JSON array in {path}")
        return rows

    raise ValueError(
        f"Unsupported file type: {path.suffix}. Supported: {', '.join(SUPPORTED_SUFFIXES)}"
    )


def load_relations(path: str | Path) -> List[RelationRecord]:
    """
    Load brand relation records.

    Rows need 'manufacturer_p1' and 'manufacturers_p2' (';'-separated).
    Rows missing either field, and rows that are not objects, are still
    returned; the equivalence builder skips or rejects them.
    """
    relations = []
    for row in _read_rows(path):
        if isinstance(row, dict):
            relations.append(RelationRecord.from_dict(row))
        else:
            logger.debug("Relation row is not an object: %r", row)
            relations.append(RelationRecord(None, None))
    logger.info("Loaded %d brand relations from %s", len(relations), path)
    return relations


def load_products(path: str | Path) -> List[Product]:
    """
    Load catalog products.

    Rows need 'title' and 'source_id'; 'm_id' marks products that
    already have a brand.
    """
    products = []
    for row in _read_rows(path):
        if not isinstance(row, dict):
            logger.warning("Skipping product row that is not an object: %r", row)
            continue
        products.append(Product.from_dict(row))
    logger.info("Loaded %d products from %s", len(products), path)
    return products


def results_filename(source: str, country: str) -> str:
    """Output file name for one (source, country) pair."""
    return f"brand_mapping_{source}_{country}.json"


def write_results(
    results: Iterable[MatchResult],
    source: str,
    country: str,
    output_dir: str | Path = "output",
) -> Path:
    """
    Write match results as a JSON array.

    Returns:
        Path of the written file

    Raises:
        ResultsWriteError: If the output directory or file cannot be written
    """
    output_path = Path(output_dir) / results_filename(source, country)
    payload = [result.to_dict() for result in results]

    try:
        os.makedirs(output_dir, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise ResultsWriteError(f"Cannot write results to {output_path}: {e}") from e

    logger.info("Wrote %d results to %s", len(payload), output_path)
    return output_path

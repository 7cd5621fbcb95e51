"""Tests for src/brands/pipeline.py"""

import json

import pytest

from src.brands.pipeline import assign_brands, load_brand_mapping, resolve_products_path


@pytest.fixture
def inputs(tmp_path):
    """Relations and products files for one benu/bg run."""
    relations = tmp_path / "relations.json"
    relations.write_text(json.dumps([
        {"manufacturer_p1": "Bayer", "manufacturers_p2": "Aspirin;Rexall"},
        {"manufacturer_p1": None, "manufacturers_p2": "Orphan"},
    ]), encoding="utf-8")

    products = tmp_path / "items.json"
    products.write_text(json.dumps([
        {"title": "Bayer Aspirin 500mg", "source_id": "1", "m_id": None},
        {"title": "Cotton pads", "source_id": "2", "m_id": None},
        {"title": "Rexall Zinc", "source_id": "3", "m_id": "42"},
    ]), encoding="utf-8")
    return relations, products, tmp_path / "output"


class TestLoadBrandMapping:
    def test_builds_from_file(self, inputs):
        relations, _, _ = inputs
        assert load_brand_mapping(str(relations)) == {"bayer": ["aspirin", "bayer", "rexall"]}


class TestAssignBrands:
    def test_end_to_end(self, inputs, sample_word_lists):
        relations, products, output_dir = inputs
        summary = assign_brands(
            "benu", "bg",
            relations_path=str(relations),
            products_path=str(products),
            output_dir=str(output_dir),
            word_lists=sample_word_lists,
        )

        assert (summary.total, summary.skipped, summary.matched, summary.unmatched) == (3, 1, 1, 1)
        assert summary.brands == {"bayer": 1}

        written = json.loads(summary.output_path.read_text(encoding="utf-8"))
        assert [row["brand"] for row in written] == ["bayer", None]
        assert written[0]["data"] == "Bayer Aspirin 500mg -> bayer,aspirin"

    def test_reuses_prebuilt_mapping(self, inputs, sample_word_lists):
        _, products, output_dir = inputs
        summary = assign_brands(
            "benu", "ro",
            relations_path="unused.json",
            products_path=str(products),
            output_dir=str(output_dir),
            mapping={"cotton": ["cotton"]},
            word_lists=sample_word_lists,
        )
        assert summary.brands == {"cotton": 1}
        assert summary.output_path.name == "brand_mapping_benu_ro.json"


class TestResolveProductsPath:
    def test_fills_placeholders(self):
        assert resolve_products_path("data/{source}_{country}.json", "benu", "bg") == "data/benu_bg.json"

    def test_plain_path_unchanged(self):
        assert resolve_products_path("data/items.json", "benu", "bg") == "data/items.json"

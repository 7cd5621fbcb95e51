"""Tests for src/models/brand.py"""

import pytest

from src.models import MatchResult, Product, RelationRecord


class TestRelationRecord:
    def test_from_dict(self):
        record = RelationRecord.from_dict(
            {"manufacturer_p1": "Bayer", "manufacturers_p2": "Aspirin;Rexall"}
        )
        assert record == RelationRecord("Bayer", "Aspirin;Rexall")

    def test_from_dict_missing_fields(self):
        assert RelationRecord.from_dict({}) == RelationRecord(None, None)


class TestProduct:
    def test_has_brand(self):
        assert Product("Tylenol", "1", existing_brand_id="77").has_brand is True

    def test_no_brand(self):
        assert Product("Tylenol", "1").has_brand is False
        assert Product("Tylenol", "1", existing_brand_id="").has_brand is False

    def test_from_dict_stringifies_ids(self):
        product = Product.from_dict({"title": "Tylenol", "source_id": 12, "m_id": 7})
        assert product.source_id == "12"
        assert product.existing_brand_id == "7"

    @pytest.mark.parametrize("m_id", [0, False, "", None])
    def test_falsy_brand_id_is_unset(self, m_id):
        product = Product.from_dict({"title": "Tylenol", "source_id": "1", "m_id": m_id})
        assert product.existing_brand_id is None
        assert product.has_brand is False


class TestMatchResult:
    def test_data_lists_all_candidates(self):
        result = MatchResult("k", "Bayer Aspirin", "bayer", ["bayer", "aspirin"])
        assert result.data == "Bayer Aspirin -> bayer,aspirin"

    def test_to_dict_unmatched(self):
        assert MatchResult("k", "Cotton pads", None).to_dict() == {
            "key": "k", "brand": None, "data": "Cotton pads -> ",
        }

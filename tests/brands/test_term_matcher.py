"""Tests for src/brands/term_matcher.py"""

import pytest

from src.brands.term_matcher import is_separate_term


class TestIsSeparateTerm:
    def test_leading_word(self):
        assert is_separate_term("Tylenol Extra", "Tylenol") is True

    def test_substring_of_larger_word(self):
        assert is_separate_term("Tylenolol", "Tylenol") is False

    def test_mid_string_case_insensitive(self):
        assert is_separate_term("extra tylenol now", "Tylenol") is True

    def test_trailing_word(self):
        assert is_separate_term("Magne B6 Sanofi", "sanofi") is True

    def test_whole_title(self):
        assert is_separate_term("Bayer", "bayer") is True

    def test_multi_word_brand(self):
        assert is_separate_term("Magne B6 x 60 tablets", "magne b6") is True

    def test_prefix_of_word_is_not_a_match(self):
        assert is_separate_term("Vitabiotics Wellwoman", "vita") is False

    def test_punctuation_boundary(self):
        assert is_separate_term("Bepanthen, baby ointment", "bepanthen") is True


class TestSpecialCharacters:
    def test_plus_sign_is_literal(self):
        assert is_separate_term("Vitamin C+ 1000mg", "c+") is True

    def test_plus_sign_does_not_repeat(self):
        assert is_separate_term("Vitamin Cc 1000mg", "c+") is False

    def test_dot_is_literal(self):
        assert is_separate_term("Dr.Max Zinc", "dr.max") is True
        assert is_separate_term("DrxMax Zinc", "dr.max") is False

    def test_ampersand_brand(self):
        assert is_separate_term("Johnson & Johnson baby oil", "johnson & johnson") is True

    def test_parentheses(self):
        assert is_separate_term("Nurofen (Reckitt) 200mg", "(reckitt)") is True


class TestEmptyInputs:
    @pytest.mark.parametrize("title", ["", None])
    def test_empty_title(self, title):
        assert is_separate_term(title, "bayer") is False

    def test_empty_brand(self):
        assert is_separate_term("Bayer Aspirin", "") is False

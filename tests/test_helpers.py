import pytest
import numpy as np

from utils.helpers import (
    normalize_text, optional_text, normalize_rule, normalize_id,
    is_valid_level, level_to_confidence, confidence_to_level,
)


class TestNormalizeText:
    """Test the normalize_text helper function."""

    def test_normalize_text_string(self):
        """Test normalize_text with string input."""
        assert normalize_text("  Hello World  ") == "Hello World"
        assert normalize_text("test") == "test"
        assert normalize_text("") == ""

    def test_normalize_text_none(self):
        """Test normalize_text with None input."""
        assert normalize_text(None) == ""

    def test_normalize_text_nan(self):
        """Test normalize_text with NaN input."""
        assert normalize_text(np.nan) == ""
        assert normalize_text(float('nan')) == ""

    def test_normalize_text_numbers(self):
        """Test normalize_text with numeric input."""
        assert normalize_text(123) == "123"
        assert normalize_text(0) == "0"
        assert normalize_text(3.14) == "3.14"

    def test_optional_text_blank_is_none(self):
        """Blank and missing values become None."""
        assert optional_text("   ") is None
        assert optional_text(np.nan) is None
        assert optional_text(" Is it true? ") == "Is it true?"


class TestNormalizeRule:
    """Test rule normalisation."""

    def test_case_and_whitespace(self):
        assert normalize_rule(" and ") == "AND"
        assert normalize_rule("Or") == "OR"

    def test_unrecognised_rules(self):
        assert normalize_rule("XOR") is None
        assert normalize_rule(None) is None
        assert normalize_rule(np.nan) is None


class TestNormalizeId:
    """Test relational id normalisation."""

    def test_integral_floats_match_ints(self):
        # pandas reads a parent column holding blanks as float
        assert normalize_id(3.0) == "3"
        assert normalize_id(3) == "3"
        assert normalize_id(np.int64(3)) == "3"
        assert normalize_id("3") == "3"

    def test_missing_ids(self):
        assert normalize_id(np.nan) is None
        assert normalize_id(None) is None
        assert normalize_id("") is None

    def test_text_ids_kept(self):
        assert normalize_id(" root ") == "root"


class TestConfidenceLevels:
    """Test the 0-5 level <-> score mapping."""

    @pytest.mark.parametrize("level,score", [(0, 0.5), (1, 0.6), (3, 0.8), (5, 1.0)])
    def test_level_to_confidence(self, level, score):
        assert level_to_confidence(level) == pytest.approx(score)

    def test_confidence_to_level(self):
        assert confidence_to_level(0.8) == 3.0
        assert confidence_to_level(1.0) == 5.0
        assert confidence_to_level(None) is None

    def test_is_valid_level(self):
        assert is_valid_level(0)
        assert is_valid_level(5)
        assert is_valid_level(2.5)
        assert not is_valid_level(6)
        assert not is_valid_level(-1)
        assert not is_valid_level("3")
        assert not is_valid_level(True)
        assert not is_valid_level(float("nan"))

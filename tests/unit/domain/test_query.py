"""
Unit tests for query normalization
"""

import pytest

from pexels_cache.domain.value_objects import normalize_query


class TestNormalizeQuery:
    """Test suite for normalize_query"""

    def test_trims_and_lowercases(self):
        assert normalize_query("  Nature  ") == "nature"

    @pytest.mark.parametrize("variant", ["Nature", "nature", " Nature ", "NATURE\t", "\nnAtUrE"])
    def test_case_and_whitespace_variants_share_a_key(self, variant):
        """Variants differing only in case/surrounding whitespace normalize identically"""
        assert normalize_query(variant) == normalize_query("nature")

    @pytest.mark.parametrize("text", ["  Mountain Lake ", "ÉTÉ", "", "   ", "a  b"])
    def test_idempotent(self, text):
        once = normalize_query(text)
        assert normalize_query(once) == once

    def test_inner_whitespace_is_kept(self):
        """Only surrounding whitespace is trimmed"""
        assert normalize_query(" Mountain  Lake ") == "mountain  lake"

    def test_whitespace_only_normalizes_to_empty(self):
        assert normalize_query(" \t\n ") == ""

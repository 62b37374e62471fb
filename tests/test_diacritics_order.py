"""
Tests for canonical diacritic ordering.

Covers reorder_diacritics on marker sequences, is_canonical, and the
whole-text recovery utility fix_diacritic_order.
"""

import pytest

from grc_betacode.diacritics import (
    fix_diacritic_order,
    is_canonical,
    order_class,
    reorder_diacritics,
)


# =============================================================================
# reorder_diacritics
# =============================================================================


class TestReorderDiacritics:
    def test_breathing_before_accent(self):
        assert reorder_diacritics("/)") == ")/"

    def test_iota_last(self):
        assert reorder_diacritics("|/)") == ")/|"
        assert reorder_diacritics("/|)") == ")/|"

    def test_diairesis_before_accent(self):
        assert reorder_diacritics("/+") == "+/"

    def test_sequence_returns_tuple(self):
        assert reorder_diacritics(["=", "("]) == ("(", "=")

    def test_empty(self):
        assert reorder_diacritics("") == ""
        assert reorder_diacritics(()) == ()

    @pytest.mark.parametrize("markers", [")", ")/", "(=|", "+\\", "_", "/|"])
    def test_canonical_unchanged(self, markers):
        assert reorder_diacritics(markers) == markers

    def test_idempotent(self):
        once = reorder_diacritics("|=(")
        assert reorder_diacritics(once) == once

    def test_same_class_keeps_first_seen(self):
        assert reorder_diacritics("/()") == "()/"
        assert reorder_diacritics(")(/") == ")(/"

    def test_unknown_marker(self):
        with pytest.raises(ValueError):
            reorder_diacritics("/9")


# =============================================================================
# order_class / is_canonical
# =============================================================================


class TestOrderClass:
    def test_classes(self):
        assert order_class(")") == 1
        assert order_class("(") == 1
        assert order_class("+") == 1
        assert order_class("/") == 2
        assert order_class("\\") == 2
        assert order_class("=") == 2
        assert order_class("|") == 3

    def test_length_marks_before_breathings(self):
        assert order_class("_") == 0
        assert order_class("^") == 0
        assert reorder_diacritics(")_") == "_)"

    def test_unknown(self):
        with pytest.raises(ValueError, match="Not a Betacode diacritic"):
            order_class("*")


class TestIsCanonical:
    def test_canonical(self):
        assert is_canonical(")/|")
        assert is_canonical("")
        assert is_canonical("|")
        assert is_canonical("_)/|")

    def test_misordered(self):
        assert not is_canonical("/)")
        assert not is_canonical("|=")

    def test_same_class_twice(self):
        assert not is_canonical(")(")
        assert not is_canonical("/\\")


# =============================================================================
# fix_diacritic_order
# =============================================================================


class TestFixDiacriticOrder:
    def test_uppercase_letter_preserved(self):
        assert fix_diacritic_order("A/)") == "A)/"
        assert fix_diacritic_order("A|/)") == "A)/|"
        assert fix_diacritic_order("A/|)") == "A)/|"
        assert fix_diacritic_order("A/+") == "A+/"

    def test_text(self):
        assert fix_diacritic_order("h\\( a/)ndra") == "h(\\ a)/ndra"

    def test_capital_marker(self):
        assert fix_diacritic_order("*a/)") == "*a)/"

    def test_tlg_style_capital(self):
        assert fix_diacritic_order("*/)a") == "*)/a"

    def test_canonical_tlg_split_unchanged(self):
        assert fix_diacritic_order("*)a/") == "*)a/"
        assert fix_diacritic_order("*)a/ *(h=|") == "*)a/ *(h=|"

    def test_misordered_tlg_split_rewritten(self):
        assert fix_diacritic_order("*/a)") == "*)/a"

    def test_valid_text_unchanged(self, iliad_betacode):
        assert fix_diacritic_order(iliad_betacode) == iliad_betacode

    def test_non_betacode_untouched(self):
        assert fix_diacritic_order("9 ) λ") == "9 ) λ"

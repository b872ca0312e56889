#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for smart quotes and special strings."""

import pytest

from orgwiki.utils.typography import apply_smart_quotes, apply_special_strings, quote_glyphs


@pytest.mark.unit
class TestQuoteGlyphs:
    """Tests for locale lookup."""

    def test_english(self):
        assert quote_glyphs("en")[:2] == ("“", "”")

    def test_region_suffix_ignored(self):
        """Only the primary language of the locale is used."""
        assert quote_glyphs("de-CH") == quote_glyphs("de")
        assert quote_glyphs("de_DE") == quote_glyphs("de")

    def test_unknown_locale_falls_back_to_english(self):
        assert quote_glyphs("xx") == quote_glyphs("en")


@pytest.mark.unit
class TestSmartQuotes:
    """Tests for apply_smart_quotes."""

    def test_double_quotes(self):
        assert apply_smart_quotes('He said "hi"') == "He said “hi”"

    def test_single_quotes(self):
        assert apply_smart_quotes("a 'b' c") == "a ‘b’ c"

    def test_apostrophe(self):
        assert apply_smart_quotes("it's") == "it’s"

    def test_quote_after_bracket_opens(self):
        assert apply_smart_quotes('("x")') == "(“x”)"

    def test_german(self):
        assert apply_smart_quotes('"x"', "de") == "„x“"

    def test_french_spacing(self):
        """French quotes carry inner spaces."""
        assert apply_smart_quotes('"x"', "fr") == "« x »"

    def test_no_quotes(self):
        assert apply_smart_quotes("plain") == "plain"


@pytest.mark.unit
class TestSpecialStrings:
    """Tests for apply_special_strings."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("a---b", "a—b"),
            ("a--b", "a–b"),
            ("wait...", "wait…"),
            ("----", "—-"),
            ("no change", "no change"),
        ],
    )
    def test_substitutions(self, source, expected):
        assert apply_special_strings(source) == expected

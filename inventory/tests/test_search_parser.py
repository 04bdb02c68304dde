"""
Tests for the wardrobe search query parser

Run with: python -m pytest inventory/tests/test_search_parser.py -v
"""

import dataclasses
from types import SimpleNamespace

import pytest
from inventory.services.search_parser import (
    SearchCriteria,
    SearchQueryParser,
    parse_search_query,
    parse_search_query_cached,
)

ALL_BODIES = ("BODIES_SHORT", "BODIES_LONG", "BODIES_SLEEVELESS")
ALL_PANTS = ("PANTS_SPORTSWEAR", "PANTS_LEGGINGS", "PANTS_DENIM", "PANTS_CHINO", "PANTS_FABRIC")


def _size(label):
    return SimpleNamespace(id=f"size-{label}", label=label)


class TestSearchQueryParser:
    """Test cases for the wardrobe query parser."""

    @pytest.fixture
    def parser(self):
        return SearchQueryParser()

    # ==========================================================================
    # Empty Queries
    # ==========================================================================

    def test_empty_query(self, parser):
        """Empty query yields no facets."""
        result = parser.parse("", [])
        assert result == SearchCriteria(raw_text="")
        assert not result.has_facets

    def test_whitespace_query(self, parser):
        """Whitespace-only query yields no facets but keeps the raw text."""
        result = parser.parse("   ", [_size("6-9 meses")])
        assert not result.has_facets
        assert result.raw_text == "   "

    def test_none_query(self, parser):
        """None is treated like an empty query."""
        result = parser.parse(None, None)
        assert not result.has_facets
        assert result.raw_text == ""

    # ==========================================================================
    # Category / Subcategory Recognition
    # ==========================================================================

    def test_category_and_color(self, parser):
        """Keyword embedded in a sentence resolves category and colour."""
        result = parser.parse("quero um bodie azul", [])
        assert result.categories == ("CLOTHES",)
        assert result.subcategories == ALL_BODIES
        assert result.colors == ("azul",)
        assert result.sizes == ()

    def test_bare_keyword_precedes_qualified_subcategory(self, parser):
        """"bodie" is listed before "bodie curto", so all bodies are returned."""
        result = parser.parse("bodie curto", [])
        assert result.subcategories == ALL_BODIES

    def test_qualified_subcategory_when_listed_first(self):
        """With the qualified phrase first in the table, it wins."""
        parser = SearchQueryParser(subcategory_keywords={
            "bodie curto": ("BODIES_SHORT",),
            "bodie": ALL_BODIES,
        })
        result = parser.parse("bodie curto", [])
        assert result.subcategories == ("BODIES_SHORT",)

    def test_accented_and_unaccented_keywords(self, parser):
        """Both spellings are listed; accents are not folded."""
        accented = parser.parse("Ténis Brancos", [])
        plain = parser.parse("tenis brancos", [])
        assert accented.categories == plain.categories == ("SHOES",)
        assert accented.subcategories == plain.subcategories == ("SNEAKERS",)
        assert accented.colors == ("branco",)

    def test_first_category_in_table_order_wins(self, parser):
        """Two categories in one query: table order decides, not typing order."""
        result = parser.parse("toalha e sapato", [])
        assert result.categories == ("SHOES",)

    def test_subcategory_scanned_independently(self, parser):
        """Subcategory can come from a different keyword than the category."""
        result = parser.parse("toalha e sapato", [])
        assert result.subcategories == ("TOWEL",)

    def test_plural_pants(self, parser):
        result = parser.parse("calças 2 anos", [])
        assert result.categories == ("CLOTHES",)
        assert result.subcategories == ALL_PANTS

    # ==========================================================================
    # Size Extraction
    # ==========================================================================

    def test_size_range_resolves_to_option_label(self, parser):
        """"6 a 9 meses" finds the "6-9 meses" option through the "9 meses" pattern."""
        result = parser.parse("bodie 6 a 9 meses azul", [_size("6-9 meses")])
        assert "6-9 meses" in result.sizes
        assert result.sizes == ("6 a 9 meses", "6-9 meses")
        assert result.categories == ("CLOTHES",)
        assert result.colors == ("azul",)

    def test_literal_size_without_options(self, parser):
        """Matched text is kept as a literal when no option covers it."""
        result = parser.parse("calças 2 anos", [])
        assert result.sizes == ("2 anos",)

    def test_option_label_typed_verbatim(self, parser):
        """A label found in the query is added once, with its original casing."""
        result = parser.parse("bodie recém-nascido", [_size("Recém-nascido"), _size("0-3 meses")])
        assert result.sizes == ("Recém-nascido",)

    def test_label_contained_in_match(self, parser):
        """Labels shorter than the matched text are added before the literal."""
        result = parser.parse("sapatos tamanho 24", [_size("24")])
        assert result.sizes == ("24", "tamanho 24")

    def test_size_pattern_without_label(self, parser):
        result = parser.parse("sapatos tamanho 24", [])
        assert result.categories == ("SHOES",)
        assert result.sizes == ("tamanho 24",)

    # ==========================================================================
    # Colour Extraction
    # ==========================================================================

    def test_multiple_colors(self, parser):
        """Every colour found is kept, in table order."""
        result = parser.parse("meias azul claro e branco", [])
        assert result.colors == ("azul", "branco", "azul claro")
        assert result.categories == ("ACCESSORIES",)
        assert result.subcategories == ("SOCKS",)

    def test_raw_text_is_untouched(self, parser):
        """Only matching is lower-cased; raw_text keeps the original."""
        result = parser.parse("  Bodie AZUL ", [])
        assert result.raw_text == "  Bodie AZUL "
        assert result.colors == ("azul",)

    # ==========================================================================
    # Unrecognised Queries
    # ==========================================================================

    def test_unrecognised_query_has_no_facets(self, parser):
        result = parser.parse("listrado", [])
        assert not result.has_facets
        assert result.raw_text == "listrado"

    # ==========================================================================
    # Criteria Value Semantics
    # ==========================================================================

    def test_parse_is_idempotent(self, parser):
        options = [_size("6-9 meses"), _size("2 anos")]
        assert parser.parse("bodie 6 a 9 meses azul", options) == parser.parse("bodie 6 a 9 meses azul", options)

    def test_criteria_is_frozen(self, parser):
        result = parser.parse("bodie azul", [])
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.colors = ("verde",)

    def test_to_dict(self, parser):
        result = parser.parse("bodie azul", [])
        assert result.to_dict() == {
            "raw_text": "bodie azul",
            "categories": ["CLOTHES"],
            "subcategories": list(ALL_BODIES),
            "sizes": [],
            "colors": ["azul"],
        }


class TestModuleLevelParse:
    """Module-level helpers share the default tables."""

    def test_cached_parse_matches_uncached(self):
        options = [_size("6-9 meses")]
        assert parse_search_query_cached("bodie 6 a 9 meses azul", options) == \
            parse_search_query("bodie 6 a 9 meses azul", options)

    def test_cached_parse_depends_on_size_labels(self):
        without = parse_search_query_cached("bodie 9 meses", [])
        with_option = parse_search_query_cached("bodie 9 meses", [_size("6-9 meses")])
        assert without.sizes == ("9 meses",)
        assert with_option.sizes == ("6-9 meses",)

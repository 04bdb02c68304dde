"""
Wardrobe Search Query Parser

Turns the text typed into the wardrobe search box into structured
search criteria:

1. Category lookup (first keyword found wins)
2. Subcategory lookup (first keyword found wins, independent of 1)
3. Size extraction (configured size labels + size-range patterns)
4. Colour extraction (every known colour found)

Unrecognised queries produce empty facets; the item matcher then falls
back to a plain substring search over the raw text.

Example:
    >>> parser = SearchQueryParser()
    >>> criteria = parser.parse("quero um bodie azul", [])
    >>> criteria.categories
    ('CLOTHES',)
    >>> criteria.colors
    ('azul',)
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .facets import CATEGORY_KEYWORDS, COLOR_KEYWORDS, SIZE_PATTERNS, SUBCATEGORY_KEYWORDS

logger = logging.getLogger(__name__)


# =============================================================================
# SEARCH CRITERIA
# =============================================================================

@dataclass(frozen=True)
class SearchCriteria:
    """
    Structured representation of a wardrobe search query.

    Every facet is an ordered tuple without duplicates. An empty tuple
    means the facet does not constrain the search.

    Example:
        Input: "bodie 6 a 9 meses azul" with size option "6-9 meses"
        Output:
            categories: ("CLOTHES",)
            subcategories: ("BODIES_SHORT", "BODIES_LONG", "BODIES_SLEEVELESS")
            sizes: ("6 a 9 meses", "6-9 meses")
            colors: ("azul",)
            raw_text: "bodie 6 a 9 meses azul"
    """
    raw_text: str = ""
    categories: Tuple[str, ...] = field(default_factory=tuple)
    subcategories: Tuple[str, ...] = field(default_factory=tuple)
    sizes: Tuple[str, ...] = field(default_factory=tuple)
    colors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_facets(self) -> bool:
        """True when at least one structured facet was recognised."""
        return bool(self.categories or self.subcategories or self.sizes or self.colors)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "raw_text": self.raw_text,
            "categories": list(self.categories),
            "subcategories": list(self.subcategories),
            "sizes": list(self.sizes),
            "colors": list(self.colors),
        }


# =============================================================================
# QUERY PARSER
# =============================================================================

class SearchQueryParser:
    """
    Keyword/pattern driven parser for wardrobe search queries.

    The keyword tables are injectable so tests can pin table ordering;
    by default the module-level tables from ``facets`` are used.
    """

    def __init__(
        self,
        category_keywords: Optional[Mapping[str, Sequence[str]]] = None,
        subcategory_keywords: Optional[Mapping[str, Sequence[str]]] = None,
        color_keywords: Optional[Sequence[str]] = None,
        size_patterns: Optional[Sequence] = None,
    ):
        self.category_keywords = category_keywords if category_keywords is not None else CATEGORY_KEYWORDS
        self.subcategory_keywords = subcategory_keywords if subcategory_keywords is not None else SUBCATEGORY_KEYWORDS
        self.color_keywords = color_keywords if color_keywords is not None else COLOR_KEYWORDS
        self.size_patterns = size_patterns if size_patterns is not None else SIZE_PATTERNS

    # ─── Public API ──────────────────────────────────────────────

    def parse(self, query: str, size_options: Iterable = ()) -> SearchCriteria:
        """
        Parse a free-text query into search criteria.

        Args:
            query: Text typed by the user (may be empty)
            size_options: Configured size options; only their ``label`` is used

        Returns:
            SearchCriteria with ``raw_text`` set to the untouched query
        """
        labels = [option.label for option in size_options or () if getattr(option, "label", None)]
        return self.parse_labels(query, labels)

    def parse_labels(self, query: str, size_labels: Sequence[str]) -> SearchCriteria:
        """Same as ``parse`` but takes the size labels directly."""
        raw_text = query or ""
        query_lower = raw_text.lower().strip()

        if not query_lower:
            return SearchCriteria(raw_text=raw_text)

        criteria = SearchCriteria(
            raw_text=raw_text,
            categories=self._first_keyword_match(query_lower, self.category_keywords),
            subcategories=self._first_keyword_match(query_lower, self.subcategory_keywords),
            sizes=self._extract_sizes(query_lower, size_labels),
            colors=self._extract_colors(query_lower),
        )
        logger.debug(f"Parsed wardrobe query {raw_text!r} -> {criteria.to_dict()}")
        return criteria

    # ─── Keyword facets ──────────────────────────────────────────

    @staticmethod
    def _first_keyword_match(query: str, table: Mapping[str, Sequence[str]]) -> Tuple[str, ...]:
        """
        Return the codes of the first table keyword contained in the query.

        Scanning stops at the first hit, in table order: a query naming two
        keywords resolves to whichever is listed first, not whichever the
        user typed first.
        """
        for keyword, codes in table.items():
            if keyword in query:
                return tuple(dict.fromkeys(codes))
        return ()

    def _extract_colors(self, query: str) -> Tuple[str, ...]:
        """Every known colour contained in the query, in table order."""
        return tuple(dict.fromkeys(color for color in self.color_keywords if color in query))

    # ─── Sizes ───────────────────────────────────────────────────

    def _extract_sizes(self, query: str, size_labels: Sequence[str]) -> Tuple[str, ...]:
        """
        Collect sizes from configured labels and size-range patterns.

        Pass 1 adds every configured label typed verbatim. Pass 2 runs
        every size pattern: labels overlapping the matched text (either
        containing it or contained in it) are added, then the matched text
        itself is kept as a literal unless an entry already covers it.
        """
        sizes: List[str] = []

        for label in size_labels:
            if label.lower() in query and label not in sizes:
                sizes.append(label)

        for pattern in self.size_patterns:
            match = pattern.search(query)
            if not match:
                continue
            matched_text = match.group(0)

            for label in size_labels:
                label_lower = label.lower()
                if (matched_text in label_lower or label_lower in matched_text) and label not in sizes:
                    sizes.append(label)

            if not any(matched_text in size.lower() for size in sizes):
                sizes.append(matched_text)

        return tuple(sizes)


# =============================================================================
# CACHED PARSE — avoid re-parsing identical queries
# =============================================================================

@lru_cache(maxsize=256)
def _cached_parse(query: str, size_labels: Tuple[str, ...]) -> SearchCriteria:
    """
    Cache parse results per (query, size labels).

    SearchCriteria is frozen, so the cached instance is safe to share.
    """
    return search_parser.parse_labels(query, size_labels)


def parse_search_query(query: str, size_options: Iterable = ()) -> SearchCriteria:
    """Parse a query with the default keyword tables."""
    return search_parser.parse(query, size_options)


def parse_search_query_cached(query: str, size_options: Iterable = ()) -> SearchCriteria:
    """Memoised ``parse_search_query``; results are identical."""
    labels = tuple(option.label for option in size_options or () if getattr(option, "label", None))
    return _cached_parse(query or "", labels)


# Singleton instance for easy import
search_parser = SearchQueryParser()

# Services package
from .search_parser import (
    SearchCriteria,
    SearchQueryParser,
    search_parser,
    parse_search_query,
    parse_search_query_cached,
)
from .item_matcher import matches_search_criteria, filter_items
from .item_filters import ItemFilters
from .colors import decode_colors, encode_colors
from .wardrobe_search import wardrobe_search_service, WardrobeSearchService, WardrobeSearchResult

__all__ = [
    # Query parser
    "SearchCriteria",
    "SearchQueryParser",
    "search_parser",
    "parse_search_query",
    "parse_search_query_cached",
    # Matching
    "matches_search_criteria",
    "filter_items",
    "ItemFilters",
    # Colours
    "decode_colors",
    "encode_colors",
    # Search service
    "wardrobe_search_service",
    "WardrobeSearchService",
    "WardrobeSearchResult",
]

"""
Wardrobe Search Service

Runs a free-text search over one child's wardrobe:

1. Load active size options
2. Parse the query into SearchCriteria (memoised)
3. Load the child's items
4. Keep items passing both the item matcher and the manual filters
5. Slice the requested page
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from core.services import BaseService

from .item_filters import ItemFilters
from .item_matcher import matches_search_criteria
from .search_parser import SearchCriteria, parse_search_query_cached


@dataclass
class WardrobeSearchResult:
    """One page of wardrobe search results."""
    criteria: SearchCriteria
    items: List[Any] = field(default_factory=list)
    total: int = 0
    offset: int = 0
    limit: int = 0

    @property
    def page(self) -> int:
        return (self.offset // self.limit) + 1 if self.limit else 1

    @property
    def has_more(self) -> bool:
        return (self.offset + self.limit) < self.total

    @property
    def total_pages(self) -> int:
        if not self.limit:
            return 1
        return max(1, -(-self.total // self.limit))  # ceil division


class WardrobeSearchService(BaseService):
    """Free-text + manual-filter search over a child's clothing items."""

    def search(self, child_id, query: str = "", filters: Optional[ItemFilters] = None,
               offset: int = 0, limit: int = 50) -> WardrobeSearchResult:
        # Deferred: keeps the pure search modules importable without the ORM
        from ..repositories import ChildRepository, ClothingItemRepository, SizeOptionRepository

        request_id = self.generate_request_id()
        filters = filters or ItemFilters()

        child = ChildRepository.get_or_404(child_id)
        size_options = list(SizeOptionRepository.list_active())
        criteria = parse_search_query_cached(query, size_options)

        self.logger.info(
            f"[{request_id}] search child={child.id} query={query!r} "
            f"facets={criteria.has_facets} filters={not filters.is_empty}"
        )

        matched = [
            item
            for item in ClothingItemRepository.list_for_child(child)
            if matches_search_criteria(item, criteria, size_options) and filters.matches(item)
        ]

        self.logger.debug(f"[{request_id}] {len(matched)} items matched")

        return WardrobeSearchResult(
            criteria=criteria,
            items=matched[offset:offset + limit],
            total=len(matched),
            offset=offset,
            limit=limit,
        )


# Singleton instance for easy import
wardrobe_search_service = WardrobeSearchService()

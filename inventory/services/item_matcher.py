"""
Wardrobe Item Matcher

Decides whether a single clothing item satisfies parsed search criteria.

Two modes:
- Fallback: no facet was recognised, so the raw query text is searched
  as a substring of the item's subcategory, size, size label and colours.
- Structured: every non-empty facet must pass (AND across facets, OR
  within a facet).

Size and colour comparisons use bidirectional containment: "azul" matches
"azul claro" and "azul claro" matches "azul". A missing size, size label
or blank colour entry compares as "", which every value contains, so an
item with only a free-text size (or only a size option) passes any size
query.

Items are read through attributes only (``category``, ``subcategory``,
``size``, ``size_option.label``, ``colors``), so any object exposing them
can be matched, not just ORM rows.
"""

from typing import Any, Iterable, List, Optional

from .colors import decode_colors
from .search_parser import SearchCriteria


def _lower(value: Any) -> str:
    return str(value).lower() if value else ""


def _size_option_label(item: Any) -> str:
    option = getattr(item, "size_option", None)
    return _lower(getattr(option, "label", None)) if option is not None else ""


def _item_colors(item: Any) -> List[str]:
    return [color.lower() for color in decode_colors(getattr(item, "colors", None), keep_blank=True)]


def _overlaps(a: str, b: str) -> bool:
    """Bidirectional substring containment; "" is contained in everything."""
    return a in b or b in a


def matches_search_criteria(item: Any, criteria: SearchCriteria, size_options: Optional[Iterable] = None) -> bool:
    """
    Return True when the item satisfies the criteria.

    ``size_options`` is accepted so callers can pass the same arguments
    they gave the parser; size labels are read from the item itself.
    """
    if not criteria.has_facets:
        return _matches_raw_text(item, criteria.raw_text)

    if criteria.categories and getattr(item, "category", None) not in criteria.categories:
        return False

    if criteria.subcategories and getattr(item, "subcategory", None) not in criteria.subcategories:
        return False

    if criteria.sizes and not _matches_sizes(item, criteria.sizes):
        return False

    if criteria.colors and not _matches_colors(item, criteria.colors):
        return False

    return True


def _matches_raw_text(item: Any, raw_text: str) -> bool:
    """Fallback substring search used when no facet was recognised."""
    if not (raw_text or "").strip():
        return True
    text = raw_text.lower()

    fields = [
        _lower(getattr(item, "subcategory", None)),
        _lower(getattr(item, "size", None)),
        _size_option_label(item),
    ]
    if any(text in value for value in fields if value):
        return True

    return any(text in color for color in _item_colors(item))


def _matches_sizes(item: Any, sizes: Iterable[str]) -> bool:
    item_size = _lower(getattr(item, "size", None))
    item_label = _size_option_label(item)

    for size in sizes:
        wanted = size.lower()
        if _overlaps(wanted, item_size) or _overlaps(wanted, item_label):
            return True
    return False


def _matches_colors(item: Any, colors: Iterable[str]) -> bool:
    item_colors = _item_colors(item)
    if not item_colors:
        return False

    for color in colors:
        wanted = color.lower()
        if any(_overlaps(wanted, item_color) for item_color in item_colors):
            return True
    return False


def filter_items(items: Iterable[Any], criteria: SearchCriteria, size_options: Optional[Iterable] = None) -> List[Any]:
    """Keep the items matching the criteria, preserving order."""
    return [item for item in items if matches_search_criteria(item, criteria, size_options)]

"""
Manual wardrobe filters.

The dropdown/select filters shown next to the search box. They are
applied independently of the free-text search and combined with it by
logical AND.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from core.exceptions import ValidationError

from ..categories import CLOTHING_CATEGORIES, ITEM_DISPOSITIONS, ITEM_STATUSES
from .colors import decode_colors

# Query parameter -> ItemFilters field
PARAM_NAMES = {
    "category": "category",
    "subcategory": "subcategory",
    "size_option": "size_option_id",
    "size": "size_text",
    "colors": "colors_text",
    "status": "status",
    "disposition": "disposition",
}


@dataclass(frozen=True)
class ItemFilters:
    """Manual filter selection; ``None`` means "any"."""
    category: Optional[str] = None
    subcategory: Optional[str] = None
    size_option_id: Optional[str] = None
    size_text: Optional[str] = None
    colors_text: Optional[str] = None
    status: Optional[str] = None
    disposition: Optional[str] = None

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "ItemFilters":
        """
        Build filters from request query parameters.

        Blank values are ignored. Unknown category, status or disposition
        codes raise ValidationError.
        """
        values = {}
        for param, attr in PARAM_NAMES.items():
            raw = params.get(param)
            if raw is None:
                continue
            value = str(raw).strip()
            if value:
                values[attr] = value

        if "category" in values and values["category"] not in CLOTHING_CATEGORIES:
            raise ValidationError(f"Unknown category '{values['category']}'", field="category")
        if "status" in values and values["status"] not in ITEM_STATUSES:
            raise ValidationError(f"Unknown status '{values['status']}'", field="status")
        if "disposition" in values and values["disposition"] not in ITEM_DISPOSITIONS:
            raise ValidationError(f"Unknown disposition '{values['disposition']}'", field="disposition")

        return cls(**values)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def matches(self, item: Any) -> bool:
        """True when the item passes every selected filter."""
        if self.category and getattr(item, "category", None) != self.category:
            return False
        if self.subcategory and getattr(item, "subcategory", None) != self.subcategory:
            return False
        if self.size_option_id and str(getattr(item, "size_option_id", None)) != self.size_option_id:
            return False
        if self.status and getattr(item, "status", None) != self.status:
            return False
        if self.disposition and getattr(item, "disposition", None) != self.disposition:
            return False

        if self.size_text:
            wanted = self.size_text.lower()
            option = getattr(item, "size_option", None)
            candidates = [getattr(item, "size", None), getattr(option, "label", None) if option else None]
            if not any(wanted in value.lower() for value in candidates if value):
                return False

        if self.colors_text:
            wanted = self.colors_text.lower()
            if not any(wanted in color.lower() for color in decode_colors(getattr(item, "colors", None))):
                return False

        return True

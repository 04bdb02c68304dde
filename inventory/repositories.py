"""
Repository Layer
================

Encapsulates all ORM queries for inventory models.
Views and services call repository methods instead of Model.objects directly.

Usage:
    from inventory.repositories import ChildRepository, ClothingItemRepository

    child = ChildRepository.get_or_404(child_id)
    items = ClothingItemRepository.list_for_child(child)
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError

from core.exceptions import NotFoundError
from core.repositories import BaseRepository

from .models import Child, ClothingItem, SizeOption
from .services.colors import encode_colors

logger = logging.getLogger(__name__)


class SizeOptionRepository(BaseRepository[SizeOption]):
    """Encapsulates SizeOption ORM queries."""

    model = SizeOption

    @classmethod
    def list_active(cls):
        """Active size options in display order."""
        return cls.filter(is_active=True).order_by("order", "label")


class ChildRepository(BaseRepository[Child]):
    """Encapsulates Child ORM queries."""

    model = Child

    @classmethod
    def get_or_404(cls, child_id):
        """
        Fetch a child by id.
        Raises NotFoundError for unknown or malformed ids.
        """
        try:
            child = cls.get_by_id_or_none(child_id)
        except (ValueError, DjangoValidationError):
            child = None

        if child is None:
            raise NotFoundError("Child not found", resource="child")
        return child


class ClothingItemRepository(BaseRepository[ClothingItem]):
    """Encapsulates ClothingItem ORM queries."""

    model = ClothingItem

    @classmethod
    def list_for_child(cls, child):
        """All of a child's items with their size option preloaded."""
        return cls.filter(child=child).select_related("size_option")

    @classmethod
    def create_item(cls, child, category, subcategory=None, size=None, size_option=None,
                    colors=None, needs_classification=None, **fields):
        """
        Create a clothing item, normalising colours and size.

        - A selected size option overrides free-text size with its label.
        - ``needs_classification`` defaults to True when subcategory,
          colours or size is missing.
        """
        subcategory = subcategory.strip() if subcategory and subcategory.strip() else None
        encoded_colors = encode_colors(colors)

        if size_option is not None:
            size = size_option.label
        elif size and size.strip():
            size = size.strip()
        else:
            size = None

        if needs_classification is None:
            needs_classification = not subcategory or not encoded_colors or not size

        item = cls.create(
            child=child,
            category=category,
            subcategory=subcategory,
            size=size,
            size_option=size_option,
            colors=encoded_colors,
            needs_classification=needs_classification,
            **fields,
        )
        logger.debug(f"Created clothing item {item.id} for child {child.id}")
        return item

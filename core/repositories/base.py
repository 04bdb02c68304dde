"""
Generic Base Repository
=======================

Type-safe, generic repository providing the standard read/write operations
shared by the app repositories.

Usage:
    from core.repositories import BaseRepository
    from inventory.models import SizeOption

    class SizeOptionRepository(BaseRepository[SizeOption]):
        model = SizeOption

        @classmethod
        def list_active(cls):
            return cls.filter(is_active=True)
"""

from typing import TypeVar, Generic, Type, Optional, Any
from django.db import models
from django.db.models import QuerySet

T = TypeVar("T", bound=models.Model)


class BaseRepository(Generic[T]):
    """
    Generic repository with standard CRUD operations.

    Subclasses MUST set the `model` class attribute:

        class ChildRepository(BaseRepository[Child]):
            model = Child
    """

    model: Type[T]

    # ── Read ──────────────────────────────────────────────────────────

    @classmethod
    def get_by_id_or_none(cls, pk: Any) -> Optional[T]:
        """Get a single instance by primary key, or None."""
        return cls.model.objects.filter(pk=pk).first()

    @classmethod
    def filter(cls, **kwargs) -> QuerySet[T]:
        """Filter instances by keyword arguments."""
        return cls.model.objects.filter(**kwargs)

    # ── Write ─────────────────────────────────────────────────────────

    @classmethod
    def create(cls, **kwargs) -> T:
        """Create and return a new instance."""
        return cls.model.objects.create(**kwargs)

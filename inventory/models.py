from django.db import models
from django.conf import settings
import uuid

from .categories import (
    CATEGORY_CHOICES,
    SUBCATEGORY_CHOICES,
    STATUS_CHOICES,
    DISPOSITION_CHOICES,
    get_category_label,
    get_subcategory_label,
)
from .services.colors import decode_colors


class Child(models.Model):
    """A child whose wardrobe is being tracked."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150)
    birth_date = models.DateField(null=True, blank=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="children",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "children"
        ordering = ["name"]
        verbose_name_plural = "Children"

    def __str__(self):
        return self.name


# ============================================================
# Size Options
# ============================================================

class SizeOption(models.Model):
    """
    An admin-configured size label ("Recém-nascido", "6-9 meses", ...).
    Only active options are offered in forms and used by the search parser.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    label = models.CharField(max_length=100, unique=True)
    description = models.CharField(max_length=255, blank=True)
    order = models.PositiveIntegerField(default=0, db_index=True)
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = "size_options"
        ordering = ["order", "label"]

    def __str__(self):
        return self.label


# ============================================================
# Clothing Items
# ============================================================

class ClothingItem(models.Model):
    """
    One piece in a child's wardrobe.

    ``colors`` holds a JSON array of colour names as text; use
    ``color_list`` to read it, which never fails on malformed data.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    child = models.ForeignKey(
        Child,
        on_delete=models.CASCADE,
        related_name="clothing_items",
    )

    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES, db_index=True)
    subcategory = models.CharField(max_length=40, choices=SUBCATEGORY_CHOICES, null=True, blank=True)

    # Free-text size, or the label copied from the selected size option
    size = models.CharField(max_length=100, null=True, blank=True)
    size_option = models.ForeignKey(
        SizeOption,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="clothing_items",
    )

    colors = models.TextField(null=True, blank=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="IN_USE", db_index=True)
    disposition = models.CharField(max_length=20, choices=DISPOSITION_CHOICES, default="KEEP", db_index=True)

    # Sets (e.g. a two-piece outfit) point at their parent piece
    is_set = models.BooleanField(default=False)
    set_item = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="set_members",
    )

    needs_classification = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "clothing_items"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["child", "category"], name="clothing_item_child_cat_idx"),
        ]

    def __str__(self):
        return f"{self.subcategory_label} ({self.size or '-'})"

    @property
    def color_list(self):
        return decode_colors(self.colors)

    @property
    def category_label(self):
        return get_category_label(self.category)

    @property
    def subcategory_label(self):
        if not self.subcategory:
            return self.category_label
        return get_subcategory_label(self.category, self.subcategory)

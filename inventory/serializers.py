"""
Inventory Serializers

Serializes wardrobe data for API responses.
"""

from rest_framework import serializers

from .models import ClothingItem, SizeOption


class SizeOptionSerializer(serializers.ModelSerializer):
    """Serializer for configured size options."""

    class Meta:
        model = SizeOption
        fields = ["id", "label", "description", "order"]


class ClothingItemSerializer(serializers.ModelSerializer):
    """Serializer for wardrobe items; colours are returned as a list."""
    category_label = serializers.CharField(read_only=True)
    subcategory_label = serializers.CharField(read_only=True)
    size_option = SizeOptionSerializer(read_only=True)
    colors = serializers.ListField(source="color_list", child=serializers.CharField(), read_only=True)

    class Meta:
        model = ClothingItem
        fields = [
            "id",
            "category",
            "category_label",
            "subcategory",
            "subcategory_label",
            "size",
            "size_option",
            "colors",
            "status",
            "disposition",
            "is_set",
            "set_item",
            "needs_classification",
            "created_at",
            "updated_at",
        ]


class SearchCriteriaSerializer(serializers.Serializer):
    """Serializer for the parsed free-text criteria."""
    raw_text = serializers.CharField(allow_blank=True)
    categories = serializers.ListField(child=serializers.CharField())
    subcategories = serializers.ListField(child=serializers.CharField())
    sizes = serializers.ListField(child=serializers.CharField())
    colors = serializers.ListField(child=serializers.CharField())

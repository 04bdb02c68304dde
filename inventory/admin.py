from django.contrib import admin
from .models import Child, ClothingItem, SizeOption


@admin.register(Child)
class ChildAdmin(admin.ModelAdmin):
    list_display = ["name", "birth_date", "owner", "created_at"]
    search_fields = ["name"]
    raw_id_fields = ["owner"]


@admin.register(SizeOption)
class SizeOptionAdmin(admin.ModelAdmin):
    list_display = ["label", "order", "is_active"]
    list_filter = ["is_active"]
    list_editable = ["order", "is_active"]
    search_fields = ["label"]


@admin.register(ClothingItem)
class ClothingItemAdmin(admin.ModelAdmin):
    list_display = ["__str__", "child", "category", "subcategory", "size", "status", "disposition", "needs_classification"]
    list_filter = ["category", "status", "disposition", "needs_classification"]
    search_fields = ["subcategory", "size", "colors"]
    raw_id_fields = ["child", "size_option", "set_item"]
    readonly_fields = ["created_at", "updated_at"]

"""
Wardrobe URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def api_root(request):
    """API root — minimal public surface."""
    return JsonResponse({
        "service": "Wardrobe API",
        "version": "1.0.0",
    })


urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", api_root, name="api-root"),
    path("api/v1/", include("inventory.urls")),
]

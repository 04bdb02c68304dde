"""
Inventory URLs

URL routing for the inventory app.
"""

from django.urls import path
from .views import WardrobeSearchView, SizeOptionListView, HealthCheckView

urlpatterns = [
    path('health/', HealthCheckView.as_view(), name='health'),
    path('size-options/', SizeOptionListView.as_view(), name='size-options'),
    path('children/<uuid:child_id>/items/', WardrobeSearchView.as_view(), name='wardrobe-search'),
]

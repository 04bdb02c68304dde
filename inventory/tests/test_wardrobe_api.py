"""
Tests for the wardrobe search API, repositories and search service

Run with: python -m pytest inventory/tests/test_wardrobe_api.py -v
"""

import uuid

import pytest
from rest_framework.test import APIClient

from core.exceptions import NotFoundError
from inventory.models import Child, SizeOption
from inventory.repositories import ChildRepository, ClothingItemRepository, SizeOptionRepository
from inventory.services import ItemFilters, wardrobe_search_service


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def child(db):
    return Child.objects.create(name="Maria")


@pytest.fixture
def sizes(db):
    return {
        "newborn": SizeOption.objects.create(label="Recém-nascido", order=0),
        "6-9": SizeOption.objects.create(label="6-9 meses", order=3),
        "2y": SizeOption.objects.create(label="2 anos", order=6),
        "old": SizeOption.objects.create(label="12 meses", order=4, is_active=False),
    }


@pytest.fixture
def wardrobe(child, sizes):
    create = ClothingItemRepository.create_item
    return {
        "blue_bodie": create(child, "CLOTHES", "BODIES_SHORT", size_option=sizes["6-9"], colors=["azul"]),
        "white_bodie": create(child, "CLOTHES", "BODIES_LONG", size_option=sizes["6-9"], colors="branco"),
        "jeans": create(child, "CLOTHES", "PANTS_DENIM", size="2 anos", colors=["azul escuro"],
                        status="FUTURE_USE"),
        "striped": create(child, "CLOTHES", None, size="listrado 6M"),
        "sneakers": create(child, "SHOES", "SNEAKERS", size="24", colors=["Azul"], disposition="SOLD"),
    }


def _ids(items):
    return {str(item["id"]) if isinstance(item, dict) else str(item.id) for item in items}


# =============================================================================
# Repositories
# =============================================================================

@pytest.mark.django_db
class TestRepositories:

    def test_size_option_overrides_free_text(self, child, sizes):
        item = ClothingItemRepository.create_item(child, "CLOTHES", "BODIES_SHORT",
                                                  size="ignored", size_option=sizes["6-9"], colors=["azul"])
        assert item.size == "6-9 meses"
        assert not item.needs_classification

    def test_needs_classification_when_incomplete(self, child):
        item = ClothingItemRepository.create_item(child, "CLOTHES", "BODIES_SHORT", size="  ")
        assert item.size is None
        assert item.colors is None
        assert item.needs_classification

    def test_colors_stored_as_json(self, child):
        item = ClothingItemRepository.create_item(child, "CLOTHES", colors="azul, verde")
        assert item.colors == '["azul", "verde"]'
        assert item.color_list == ["azul", "verde"]

    def test_list_active_sizes(self, sizes):
        labels = [option.label for option in SizeOptionRepository.list_active()]
        assert labels == ["Recém-nascido", "6-9 meses", "2 anos"]

    def test_get_or_404_unknown(self):
        with pytest.raises(NotFoundError):
            ChildRepository.get_or_404(uuid.uuid4())

    def test_get_or_404_malformed(self):
        with pytest.raises(NotFoundError):
            ChildRepository.get_or_404("not-a-uuid")

    def test_list_for_child_is_scoped(self, child, wardrobe):
        other = Child.objects.create(name="Joana")
        ClothingItemRepository.create_item(other, "CLOTHES", "BODIES_SHORT", colors=["azul"])
        assert _ids(ClothingItemRepository.list_for_child(child)) == _ids(wardrobe.values())


# =============================================================================
# Search Service
# =============================================================================

@pytest.mark.django_db
class TestWardrobeSearchService:

    def test_free_text_and_filters_combine(self, child, wardrobe):
        result = wardrobe_search_service.search(
            child.id, query="azul", filters=ItemFilters(category="CLOTHES"),
        )
        assert _ids(result.items) == _ids([wardrobe["blue_bodie"], wardrobe["jeans"]])
        assert result.criteria.colors == ("azul",)

    def test_size_query_resolves_option_label(self, child, wardrobe):
        result = wardrobe_search_service.search(child.id, query="bodie 6 a 9 meses")
        assert "6-9 meses" in result.criteria.sizes
        assert _ids(result.items) == _ids([wardrobe["blue_bodie"], wardrobe["white_bodie"]])

    def test_inactive_size_labels_are_ignored(self, child, wardrobe):
        result = wardrobe_search_service.search(child.id, query="bodie 9-12 meses")
        assert result.criteria.sizes == ("9-12 meses",)

    def test_pagination(self, child, wardrobe):
        result = wardrobe_search_service.search(child.id, query="", offset=2, limit=2)
        assert result.total == 5
        assert len(result.items) == 2
        assert result.page == 2
        assert result.total_pages == 3
        assert result.has_more

    def test_unknown_child(self, db):
        with pytest.raises(NotFoundError):
            wardrobe_search_service.search(uuid.uuid4(), query="azul")


# =============================================================================
# HTTP API
# =============================================================================

@pytest.mark.django_db
class TestWardrobeSearchAPI:

    def _url(self, child_id):
        return f"/api/v1/children/{child_id}/items/"

    def test_empty_query_lists_everything(self, api_client, child, wardrobe):
        response = api_client.get(self._url(child.id))
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert data["query"]["criteria"]["categories"] == []
        assert _ids(data["items"]) == _ids(wardrobe.values())

    def test_bodie_azul(self, api_client, child, wardrobe):
        response = api_client.get(self._url(child.id), {"q": "quero um bodie azul"})
        data = response.json()
        assert data["query"]["criteria"]["categories"] == ["CLOTHES"]
        assert data["query"]["criteria"]["colors"] == ["azul"]
        assert _ids(data["items"]) == _ids([wardrobe["blue_bodie"]])

        item = data["items"][0]
        assert item["colors"] == ["azul"]
        assert item["category_label"] == "Roupa"
        assert item["size_option"]["label"] == "6-9 meses"

    def test_fallback_substring(self, api_client, child, wardrobe):
        response = api_client.get(self._url(child.id), {"q": "listrado"})
        assert _ids(response.json()["items"]) == _ids([wardrobe["striped"]])

    def test_manual_filters(self, api_client, child, wardrobe):
        response = api_client.get(self._url(child.id), {"q": "azul", "disposition": "SOLD"})
        assert _ids(response.json()["items"]) == _ids([wardrobe["sneakers"]])

        response = api_client.get(self._url(child.id), {"status": "FUTURE_USE"})
        assert _ids(response.json()["items"]) == _ids([wardrobe["jeans"]])

    def test_query_is_sanitized(self, api_client, child, wardrobe):
        response = api_client.get(self._url(child.id), {"q": "  bodie\x07   azul  "})
        assert response.json()["query"]["original"] == "bodie azul"

    def test_pagination_params(self, api_client, child, wardrobe):
        data = api_client.get(self._url(child.id), {"page": 3, "limit": 2}).json()
        assert len(data["items"]) == 1
        assert data["page"] == 3
        assert data["has_more"] is False

    def test_invalid_filter_returns_400(self, api_client, child):
        response = api_client.get(self._url(child.id), {"status": "LOST"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["detail"]["field"] == "status"

    def test_unknown_child_returns_404(self, api_client, db):
        response = api_client.get(self._url(uuid.uuid4()))
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


@pytest.mark.django_db
class TestSupportingEndpoints:

    def test_size_options(self, api_client, sizes):
        response = api_client.get("/api/v1/size-options/")
        assert response.status_code == 200
        assert [option["label"] for option in response.json()] == ["Recém-nascido", "6-9 meses", "2 anos"]

    def test_health(self, api_client):
        response = api_client.get("/api/v1/health/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

"""
Inventory Views

API endpoints for searching a child's wardrobe and listing size options.
"""

from django.http import JsonResponse
from django.views import View
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from .query_sanitizer import sanitize_query, get_pagination_params
from .repositories import SizeOptionRepository
from .serializers import ClothingItemSerializer, SearchCriteriaSerializer, SizeOptionSerializer
from .services import ItemFilters, wardrobe_search_service


class WardrobeSearchView(APIView):
    """
    Search a child's wardrobe with free text plus manual filters.

    GET /api/v1/children/<child_id>/items/?q=<query>&page=1&limit=50

    Query params:
        q            - Free-text query ("bodie 6 a 9 meses azul"); empty lists everything
        category     - Category code (CLOTHES, SHOES, ACCESSORIES, BATH_BED)
        subcategory  - Subcategory code
        size_option  - Size option id
        size         - Substring of the item size / size label
        colors       - Substring of any item colour
        status       - IN_USE, FUTURE_USE, RETIRED
        disposition  - KEEP, SOLD, GIVEN_AWAY
        page, limit, offset - Pagination

    Response includes:
        - Parsed criteria for the query
        - Paginated list of matching items
        - Pagination metadata (total, page, has_more)
    """
    permission_classes = [AllowAny]

    def get(self, request, child_id):
        query = sanitize_query(request.query_params.get("q", ""))
        filters = ItemFilters.from_params(request.query_params)
        offset, limit = get_pagination_params(request)

        result = wardrobe_search_service.search(
            child_id, query=query, filters=filters, offset=offset, limit=limit,
        )

        return Response({
            "query": {
                "original": query,
                "criteria": SearchCriteriaSerializer(result.criteria.to_dict()).data,
            },
            "items": ClothingItemSerializer(result.items, many=True).data,
            "total": result.total,
            "page": result.page,
            "limit": result.limit,
            "has_more": result.has_more,
            "total_pages": result.total_pages,
        })


class SizeOptionListView(APIView):
    """
    List active size options.

    GET /api/v1/size-options/
    """
    permission_classes = [AllowAny]

    def get(self, request):
        options = SizeOptionRepository.list_active()
        return Response(SizeOptionSerializer(options, many=True).data)


class HealthCheckView(View):
    """
    Simple health check endpoint for load balancers and deployment platforms.
    Returns 200 OK if the service is running.
    """

    def get(self, request):
        return JsonResponse({
            "status": "healthy",
            "service": "wardrobe-api",
            "version": "1.0.0",
        })

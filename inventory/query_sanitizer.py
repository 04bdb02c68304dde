"""
Query Sanitization for the wardrobe search endpoint.

Strips control characters, normalises whitespace and enforces the
configured length limit before the text reaches the search parser.
An empty query is valid: it lists the whole wardrobe.
"""

import re

from django.conf import settings


def sanitize_query(raw: str) -> str:
    """
    Sanitise a wardrobe search query.

    1. Remove null bytes and control characters
    2. Collapse runs of whitespace into single spaces
    3. Strip leading/trailing whitespace
    4. Truncate to SEARCH_MAX_QUERY_LENGTH
    """
    if not raw:
        return ""

    q = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", raw)
    q = re.sub(r"\s+", " ", q).strip()

    return q[:settings.SEARCH_MAX_QUERY_LENGTH]


def get_pagination_params(request) -> tuple[int, int]:
    """
    Extract and clamp page/limit from query params.

    Supports:
        ?page=2&limit=20    (page-based)
        ?offset=40&limit=20 (offset-based, takes priority over page)

    Returns (offset, limit).
    """
    default_size = settings.SEARCH_DEFAULT_PAGE_SIZE
    max_size = settings.SEARCH_MAX_PAGE_SIZE

    try:
        limit = int(request.query_params.get("limit", default_size))
    except (ValueError, TypeError):
        limit = default_size
    limit = max(1, min(limit, max_size))

    # offset takes priority
    offset_raw = request.query_params.get("offset")
    if offset_raw is not None:
        try:
            offset = max(0, int(offset_raw))
        except (ValueError, TypeError):
            offset = 0
    else:
        try:
            page = max(1, int(request.query_params.get("page", 1)))
        except (ValueError, TypeError):
            page = 1
        offset = (page - 1) * limit

    return offset, limit

"""
Wardrobe Exception Hierarchy
============================

Domain-specific exceptions for structured error handling in the API layer.
The search engine itself never raises; these cover request validation and
missing resources.

Usage::

    from core.exceptions import ValidationError, NotFoundError

    # In a filter parser:
    raise ValidationError("Unknown status", field="status")

    # In a repository:
    raise NotFoundError("Child not found", resource="child")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class WardrobeError(Exception):
    """Base exception for all wardrobe application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["detail"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(WardrobeError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


class NotFoundError(WardrobeError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, message="Resource not found", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)

"""
Product Catalog Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       turn them into HTTP responses with the right status code.
Who:   Raised by services and storage; caught by global handlers.

Exception Hierarchy:
    CatalogError (base)
    ├── ValidationError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── StorageError      → 500 Internal Server Error

Response bodies:
    The product API answers business errors in two shapes, depending on
    the endpoint: `{"error": "<message>"}` for the image endpoint and a
    bare `text/plain` message for update/delete. `plain_text` selects the
    latter. StorageError never exposes its message or context to clients.
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """
    Base exception for all product catalog errors.

    Attributes:
        message:     User-facing error description (safe to return in API response)
        context:     Additional debug info (logged but NOT returned to client)
        plain_text:  Render the response as text/plain instead of JSON
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
        plain_text: bool = False,
    ):
        self.message = message
        self.context = context or {}
        self.plain_text = plain_text
        super().__init__(self.message)


class ValidationError(CatalogError):
    """
    Raised when a request cannot be served because of the client's data.

    When:    A product has no image filename and its image is requested.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        plain_text: bool = False,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx, plain_text=plain_text)
        self.field = field


class NotFoundError(CatalogError):
    """
    Raised when a requested resource does not exist.

    When:    Unknown product id, or an image file missing from the images folder.
    HTTP:    404 Not Found

    The record store signals "not found" with None / a zero count; the
    product service converts that into this exception so that routes stay
    free of status-code logic.
    """

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
        plain_text: bool = False,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx, plain_text=plain_text)


class StorageError(CatalogError):
    """
    Raised when the data file cannot be read, parsed, or written.

    When:    Missing data file, permission denied, malformed JSON, disk full.
    HTTP:    500 Internal Server Error

    There is no recovery: the request fails and the file is left as it was
    before the failed operation (or half-written, if the write itself broke).
    """

    def __init__(
        self,
        message: str = "Product storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

"""
Acme Flavors Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the HTTP error paths.
Why:   The route layer turns repository Results into these exceptions, and
       the global handlers registered in main.py turn them into JSON
       responses with the right status code.
How:   Each exception class carries a message and optional context dict.
       The context is logged server-side and never returned to the client.

Exception Hierarchy:
    FlavorsError (base)
    ├── NotFoundError   → 404 Not Found
    └── DatabaseError   → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class FlavorsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(FlavorsError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /api/flavors/{id} with an id that matches no row.
    HTTP:    404 Not Found (or 200 null when LEGACY_NOT_FOUND is set, in which
             case the route never raises it).
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(FlavorsError):
    """
    Raised when a store operation failed.

    When:    Connection lost mid-query, constraint violation, bad parameter.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the underlying
    driver error is only logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

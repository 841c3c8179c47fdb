"""
LexSite Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios the API reports.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and middleware; caught by global handlers.

Exception Hierarchy:
    LexSiteError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests

The fee engine itself raises none of these: bad claim values are refused
by the calculator service before the engine runs.
"""

from typing import Any, Dict, Optional


class LexSiteError(Exception):
    """
    Base exception for all LexSite application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info. Logged; returned only by handlers
                  that expose `details`.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(LexSiteError):
    """
    Raised when client input fails a business rule.

    When:    Claim amount is not a number, not finite, or not positive;
             unknown case type or court type filter.
    HTTP:    400 Bad Request

    Schema-level problems (wrong JSON types, missing fields) are left to
    FastAPI, which answers 422.

    Example response:
        {
            "error": "validation_error",
            "message": "Please enter a valid claim amount",
            "details": {"field": "claim_value", "value": "abc"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(LexSiteError):
    """
    Raised when a requested resource does not exist.

    When:    Slab number outside the published schedule.
    HTTP:    404 Not Found
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


class DatabaseError(LexSiteError):
    """
    Raised when a reference-data query fails unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Query details
    stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(LexSiteError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after

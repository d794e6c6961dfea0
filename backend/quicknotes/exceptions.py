"""
QuickNotes Backend - Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for the two failure outcomes
       of the note boundary.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by NoteService; caught by global handlers.
When:  During request processing, synchronously, before any write happens.

Exception Hierarchy:
    QuickNotesError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── NotFoundError            → 404 Not Found

The repository layer never raises these. Absence is reported there as None
(lookups, updates) or False (deletes), and NoteService converts it into
NotFoundError.
"""

from typing import Any, Dict, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional detail about the failure (field, constraint, id)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickNotesError):
    """
    Raised when client input fails validation.

    What:    The client sent a note payload that breaks a title rule.
    When:    Title missing, empty or whitespace-only, or longer than the limit.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Title must be at most 256 characters.",
            "details": {"field": "title", "constraint": "max_length", "max_length": 256}
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


class NotFoundError(QuickNotesError):
    """
    Raised when a requested resource does not exist.

    What:    The id does not resolve to a stored note.
    When:    GET/PUT/DELETE /api/notes/{id} with an unknown or malformed id.
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

"""
QuickNotes Backend - Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for the notes service.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Used by route handlers and NoteService as input and return types.

Title rules are NOT enforced here. Request schemas accept any title
(including a missing one) so that NoteService can apply a single set of
title rules and report them as a 400 validation_error.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Body of POST /api/notes.
    Fields:
        - title: Required by NoteService (non-blank, at most 256 characters)
        - content: Optional; missing or null becomes ""
    """
    title: Optional[str] = Field(
        default=None,
        description="Note title (required, at most 256 characters, trimmed)",
        examples=["Groceries"],
    )
    content: Optional[str] = Field(
        default=None,
        description="Note body text (optional, defaults to empty)",
        examples=["Milk, eggs"],
    )


class NoteUpdate(NoteCreate):
    """Body of PUT /api/notes/{id}. Same shape and rules as NoteCreate."""


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Returned by every note endpoint that yields a note (create, list
           items, get, update).
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body text")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last modified (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code ("validation_error", "not_found")
        message: Human-readable description for display to users
        details: Optional extra context (field and constraint for validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "Title is required and must not be blank.",
            "details": {"field": "title", "constraint": "required"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    storage: str = Field(description="Backing store in use")
    note_count: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")


class LivenessResponse(BaseModel):
    """Root liveness response returned by GET /."""
    message: str = Field(default="Healthy")

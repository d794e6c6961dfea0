"""
QuickNotes Backend - Notes Route Handlers
===========================================

What:  CRUD endpoints for the note resource under /api/notes.
How:   Extracts path parameters and bodies, delegates to NoteService, sets
       status codes and headers.
Who:   Called by any HTTP client of the notes API.

Ids are declared as plain strings, not UUID, so that a malformed id reaches
NoteService and is answered with 404 like any other unknown id.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from quicknotes.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from quicknotes.services.note_service import NoteService

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])


def get_note_service(request: Request) -> NoteService:
    """Dependency returning the NoteService owned by the running application."""
    return request.app.state.note_service


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Invalid title", "model": ErrorResponse},
    },
    summary="Create a new note",
    description="Creates a new note with the provided title and content.",
)
async def create_note(
    payload: NoteCreate,
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Create a note.

    Returns 201 with a Location header pointing at the new resource.
    """
    note = await service.create_note(title=payload.title, content=payload.content)
    response.headers["Location"] = f"{router.prefix}/notes/{note.id}"
    return note


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={
        200: {"description": "All notes, most recently updated first"},
    },
    summary="List notes",
    description="Gets a list of all notes ordered by last update, newest first.",
)
async def list_notes(
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    notes = await service.list_notes()
    response.headers["X-Total-Count"] = str(len(notes))
    return notes


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "Note details", "model": NoteResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get note by id",
    description="Retrieves a note by its unique identifier.",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.get_note(note_id)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "Updated note", "model": NoteResponse},
        400: {"description": "Invalid title", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update note",
    description="Updates the title and content of an existing note.",
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.update_note(
        note_id,
        title=payload.title,
        content=payload.content,
    )


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        204: {"description": "Note deleted"},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete note",
    description="Deletes a note by its id.",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

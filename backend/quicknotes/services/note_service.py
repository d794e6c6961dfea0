"""
QuickNotes Backend - Note Service (Request Boundary)
=====================================================

What:  Translates note requests into repository calls and repository results
       into response schemas.
How:   Validates titles, stamps ids and timestamps, merges updates onto the
       stored record, and converts absence into NotFoundError.
Who:   Called by route handlers; calls a NoteRepository.
When:  For every create, list, get, update and delete request.

Request Flow:
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────────┐
    │  Route   │───▶│  Validate   │───▶│  Repository  │───▶│   Response   │
    │          │    │  & Stamp    │    │  (Store)     │    │  or Error    │
    └──────────┘    └─────────────┘    └──────────────┘    └──────────────┘

    Failure outcomes (both raised before any write):
    - ValidationError: title missing, blank, or too long
    - NotFoundError: id is malformed or resolves to no note

NoteService keeps no note state. The repository and clock are injected
through the constructor; the clock returns timezone-aware UTC datetimes.
"""

import dataclasses
import logging
import uuid
from datetime import datetime
from typing import Callable, List, Optional

from quicknotes.config import settings
from quicknotes.exceptions import NotFoundError, ValidationError
from quicknotes.models.note import Note, utc_now
from quicknotes.repositories.base import NoteRepository
from quicknotes.schemas.note import NoteResponse

logger = logging.getLogger(__name__)


def validate_title(title: Optional[str], max_length: int) -> str:
    """
    Check a title against the note rules and return it trimmed.

    Rules:
        - Required: None, "" and whitespace-only titles are rejected
        - Length: at most `max_length` code points, counted on the title as
          sent (surrounding whitespace included)

    Raises:
        ValidationError: With field="title" and the violated constraint
    """
    trimmed = (title or "").strip()
    if not trimmed:
        raise ValidationError(
            message="Title is required and must not be blank.",
            field="title",
            context={"constraint": "required"},
        )
    if len(title) > max_length:
        raise ValidationError(
            message=f"Title must be at most {max_length} characters.",
            field="title",
            context={
                "constraint": "max_length",
                "max_length": max_length,
                "actual_length": len(title),
            },
        )
    return trimmed


def parse_note_id(note_id: str) -> Optional[uuid.UUID]:
    """Parse a note id; None when the text is not a valid UUID."""
    try:
        return uuid.UUID(str(note_id))
    except ValueError:
        return None


class NoteService:
    """
    Boundary layer for note operations.

    Responsibilities:
        - create_note(): Validate, stamp, store
        - list_notes(): All notes, most recently updated first
        - get_note(): Single note with not-found handling
        - update_note(): Validate, merge, re-stamp updated_at, store
        - delete_note(): Remove or report not found
    """

    def __init__(
        self,
        repository: NoteRepository,
        clock: Callable[[], datetime] = utc_now,
        title_max_length: Optional[int] = None,
    ):
        self.repository = repository
        self.clock = clock
        if title_max_length is None:
            title_max_length = settings.note_title_max_length
        self.title_max_length = title_max_length

    async def create_note(self, title: Optional[str], content: Optional[str] = None) -> NoteResponse:
        """
        Create a note from a title and optional content.

        Returns:
            NoteResponse for the stored note; created_at == updated_at.

        Raises:
            ValidationError: Title missing, blank or too long (nothing stored)
        """
        clean_title = validate_title(title, self.title_max_length)
        now = self.clock()
        note = Note(
            id=uuid.uuid4(),
            title=clean_title,
            content=content or "",
            created_at=now,
            updated_at=now,
        )
        stored = self.repository.create(note)
        logger.info("Note created: %s", stored.id)
        return NoteResponse.model_validate(stored)

    async def list_notes(self) -> List[NoteResponse]:
        """Every stored note, ordered by updated_at descending."""
        return [NoteResponse.model_validate(note) for note in self.repository.get_all()]

    async def get_note(self, note_id: str) -> NoteResponse:
        """
        Retrieve a single note by id.

        A malformed id is reported exactly like an unknown one, since no note
        can carry it.

        Raises:
            NotFoundError: Id is malformed or unknown
        """
        note = self._find(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        note_id: str,
        title: Optional[str],
        content: Optional[str] = None,
    ) -> NoteResponse:
        """
        Replace the title and content of an existing note.

        Workflow:
            1. Validate title (a failure leaves the note untouched)
            2. Fetch the existing note (absent → NotFoundError, no write)
            3. Merge trimmed title and defaulted content, keep id and created_at
            4. Set updated_at to now, never earlier than the previous value
            5. Store the merged record

        Raises:
            ValidationError: Title missing, blank or too long
            NotFoundError: Id is malformed, unknown, or deleted meanwhile
        """
        clean_title = validate_title(title, self.title_max_length)

        existing = self._find(note_id)
        if existing is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))

        merged = dataclasses.replace(
            existing,
            title=clean_title,
            content=content or "",
            updated_at=max(self.clock(), existing.updated_at),
        )

        updated = self.repository.update(merged)
        if updated is None:
            # Deleted between the lookup and the write
            raise NotFoundError(resource="note", resource_id=str(note_id))

        logger.info("Note updated: %s", updated.id)
        return NoteResponse.model_validate(updated)

    async def delete_note(self, note_id: str) -> None:
        """
        Delete a note by id.

        Raises:
            NotFoundError: Id is malformed or no note was removed
        """
        parsed = parse_note_id(note_id)
        if parsed is None or not self.repository.delete(parsed):
            raise NotFoundError(resource="note", resource_id=str(note_id))
        logger.info("Note deleted: %s", parsed)

    def _find(self, note_id: str) -> Optional[Note]:
        parsed = parse_note_id(note_id)
        if parsed is None:
            logger.debug("Rejecting malformed note id %r", note_id)
            return None
        return self.repository.get_by_id(parsed)

"""
QuickNotes Backend - Note Domain Model
========================================

What:  Immutable record representing a single note.
How:   Frozen dataclass; changes produce a new instance via dataclasses.replace().
Who:   Built by NoteService, stored by NoteRepository implementations,
       mapped to NoteResponse by the service layer.

Field rules:
    - id: UUID4 assigned by NoteService at creation, never client-supplied
    - title: trimmed, non-empty, at most `note_title_max_length` code points
    - content: free text, "" when absent
    - created_at / updated_at: timezone-aware UTC, updated_at >= created_at

Lifecycle:
    1. Created by a create request (id + both timestamps stamped together)
    2. Replaced by update requests (title, content, updated_at change)
    3. Removed by a delete request
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Note:
    id: uuid.UUID
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title[:30]!r}, updated_at={self.updated_at.isoformat()})>"

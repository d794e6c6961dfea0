"""
QuickNotes Backend - In-Memory Note Repository
================================================

What:  Process-local note store backed by a dict keyed by note id.
How:   A single threading.Lock serializes every read and write of the dict.
       Each operation holds the lock for one dict access (plus a copy for
       get_all), so all operations are atomic per key.
Who:   Created once per application by create_app() and shared by all requests.

Thread Safety:
    Async route handlers run on the event loop and sync code runs in
    Starlette's threadpool; the lock covers both. No operation blocks on I/O
    while holding it.

    get_all() copies the values under the lock and sorts the copy outside it.
    A concurrent get_all() can observe some but not all of several in-flight
    writes to different notes; there is no cross-note transaction.

Limitations:
    Notes live only as long as the process. Restarting the server empties
    the store.
"""

import logging
import threading
import uuid
from typing import Dict, List, Optional

from quicknotes.models.note import Note
from quicknotes.repositories.base import NoteRepository

logger = logging.getLogger(__name__)


class InMemoryNoteRepository(NoteRepository):
    """Lock-guarded dict implementation of NoteRepository."""

    def __init__(self) -> None:
        self._notes: Dict[uuid.UUID, Note] = {}
        self._lock = threading.Lock()

    def create(self, note: Note) -> Note:
        with self._lock:
            if note.id in self._notes:
                logger.warning("Overwriting existing note %s on create", note.id)
            self._notes[note.id] = note
        return note

    def get_all(self) -> List[Note]:
        with self._lock:
            snapshot = list(self._notes.values())

        # Two stable sorts: secondary key first, then primary key
        snapshot.sort(key=lambda n: str(n.id))
        snapshot.sort(key=lambda n: n.updated_at, reverse=True)
        return snapshot

    def get_by_id(self, note_id: uuid.UUID) -> Optional[Note]:
        with self._lock:
            return self._notes.get(note_id)

    def update(self, note: Note) -> Optional[Note]:
        with self._lock:
            if note.id not in self._notes:
                return None
            self._notes[note.id] = note
        return note

    def delete(self, note_id: uuid.UUID) -> bool:
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

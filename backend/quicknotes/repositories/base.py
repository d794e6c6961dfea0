"""
QuickNotes Backend - Abstract Note Repository Interface
=========================================================

What:  Abstract base class defining the contract for note storage backends.
How:   Concrete implementations inherit from NoteRepository and implement
       the five storage primitives plus count().
Who:   Called by NoteService; never by routes directly.

Contract shared by all implementations:
    - Records are stored exactly as given; ids and timestamps are assigned
      by the caller before create() is called.
    - No method raises for a missing id. Absence is returned as None or False.
    - All methods are safe to call concurrently without external locking.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from quicknotes.models.note import Note


class NoteRepository(ABC):
    """
    Abstract interface for note storage.

    Implementations:
        - InMemoryNoteRepository: dict guarded by a threading.Lock (default)
    """

    @abstractmethod
    def create(self, note: Note) -> Note:
        """
        Insert a fully-formed note.

        An existing record with the same id is overwritten silently.

        Returns:
            Note: The stored note.
        """
        ...

    @abstractmethod
    def get_all(self) -> List[Note]:
        """
        Return a snapshot of every stored note.

        Ordering:
            updated_at descending (most recently touched first), ties broken
            by the string form of the id, ascending.

        Returns:
            List[Note]: A new list; empty when nothing is stored.
        """
        ...

    @abstractmethod
    def get_by_id(self, note_id: uuid.UUID) -> Optional[Note]:
        """Return the note with this id, or None when there is none."""
        ...

    @abstractmethod
    def update(self, note: Note) -> Optional[Note]:
        """
        Replace the stored record that has the same id as `note`.

        Returns:
            Optional[Note]: The stored note, or None when no record with that
            id exists (in which case nothing is written).
        """
        ...

    @abstractmethod
    def delete(self, note_id: uuid.UUID) -> bool:
        """Remove the note; True if one was removed, False if none existed."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of stored notes."""
        ...

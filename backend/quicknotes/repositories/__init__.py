# Repositories package init
"""
QuickNotes Backend - Note Store
=================================

What:  Storage layer holding the canonical copy of every note.
How:   NoteRepository defines the create / get-all / get-by-id / update / delete
       contract; InMemoryNoteRepository implements it with a lock-guarded dict.

Repository Inventory:
    - NoteRepository (abstract): Interface any backing store implements
    - InMemoryNoteRepository: Process-local, thread-safe implementation (default)

Absence is never an exception at this layer: lookups and updates return None,
deletes return False.
"""

from quicknotes.repositories.base import NoteRepository
from quicknotes.repositories.memory import InMemoryNoteRepository

__all__ = ["NoteRepository", "InMemoryNoteRepository"]

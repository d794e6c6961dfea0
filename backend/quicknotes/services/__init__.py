# Services package init
"""
QuickNotes Backend - Services Layer
=====================================

What:  Boundary layer sitting between routes (HTTP) and the note repository.
How:   Services accept request values, apply validation and timestamping rules,
       and return response schemas or raise typed application errors.
       Route handlers obtain the service through FastAPI dependency injection.

Service Inventory:
    - NoteService: Create, list, get, update and delete notes
"""

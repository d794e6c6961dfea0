# Routes package init
"""
QuickNotes Backend - API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles a specific resource or action.

Route Inventory:
    - notes.py:   POST   /api/notes          (create note)
                  GET    /api/notes          (list notes)
                  GET    /api/notes/{id}     (get single note)
                  PUT    /api/notes/{id}     (update note)
                  DELETE /api/notes/{id}     (delete note)
    - health.py:  GET    /                   (liveness)
                  GET    /health             (service health check)

Design Principle:
    Routes handle HTTP concerns only:
    - Extract data from the request (path params, body)
    - Call NoteService
    - Set status code and headers on the response

    Validation, timestamping and not-found handling belong to NoteService.
"""

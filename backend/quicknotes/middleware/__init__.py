# Middleware package init
"""
QuickNotes Backend - Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error bodies
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: Starlette built-ins configured in main.py

    Responses pass back through the chain in reverse, which is where the
    X-Request-ID header is added and the duration is measured.
"""

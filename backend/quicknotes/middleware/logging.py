"""
QuickNotes Backend - Request Logging Middleware
=================================================

What:  One access log line for every HTTP request.
How:   Measures time from middleware entry to response, then logs method, path,
       status, duration and request ID on the `quicknotes.access` logger.
       Requests against /api/notes also log which note they touched:
         - item routes: the id from the path
         - create: the id from the Location header of the 201 response
         - list: the number of notes returned (X-Total-Count)
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware (uses request ID for correlation).

Example lines:
    2024-01-15T12:00:00 [INFO] quicknotes.access: POST /api/notes 201 1.4ms [a1b2c3d4] note=6f1c...
    2024-01-15T12:00:01 [INFO] quicknotes.access: GET /api/notes 200 0.6ms [e5f6a7b8] count=3

Request bodies are never logged; titles and content stay out of the logs.
"""

import logging
import time
from typing import Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quicknotes.middleware.request_id import request_id_var

logger = logging.getLogger("quicknotes.access")

NOTES_PATH = "/api/notes"


def note_fields(path: str, response: Response) -> Dict[str, str]:
    """
    Note-specific fields for an access log line.

    Returns:
        {"note_id": ...} for item routes and successful creates,
        {"count": ...} for the list route, {} for anything else.
    """
    if path.startswith(NOTES_PATH + "/"):
        note_id = path[len(NOTES_PATH) + 1:]
        return {"note_id": note_id} if note_id else {}

    if path.rstrip("/") != NOTES_PATH:
        return {}

    location: Optional[str] = response.headers.get("Location")
    if location and location.startswith(NOTES_PATH + "/"):
        return {"note_id": location[len(NOTES_PATH) + 1:]}

    total = response.headers.get("X-Total-Count")
    if total is not None:
        return {"count": total}
    return {}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status, duration and touched note of each request.

    Level selection:
        5xx → ERROR
        4xx → WARNING (unknown ids and bad titles show up here)
        2xx/3xx → INFO

    Health probes (/ and /health) are not logged.
    """

    SKIPPED_PATHS = {"/", "/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        fields = note_fields(path, response)
        suffix = "".join(f" {key.replace('_id', '')}={value}" for key, value in fields.items())

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s]%s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            suffix,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                **fields,
            },
        )

        return response

"""
QuickNotes Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped, created fresh for each test):
    ├── repository: Empty InMemoryNoteRepository
    ├── clock: Controllable UTC clock for deterministic timestamps
    ├── note_service: NoteService wired to `repository` and `clock`
    ├── make_note: Factory for fully-formed Note records
    └── test_client: HTTPX AsyncClient against a fresh app
"""

import os
import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Reduce noise during tests
os.environ["LOG_LEVEL"] = "WARNING"

from quicknotes.models.note import Note  # noqa: E402
from quicknotes.repositories import InMemoryNoteRepository  # noqa: E402
from quicknotes.services.note_service import NoteService  # noqa: E402


class FakeClock:
    """
    Callable clock returning a fixed UTC time until moved.

    Usage:
        clock.advance(seconds=5)   # move forward
        clock.set(some_datetime)   # jump anywhere, including backwards
    """

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now

    def set(self, value: datetime) -> None:
        self.now = value


@pytest.fixture
def repository():
    """Provides an empty in-memory note store."""
    return InMemoryNoteRepository()


@pytest.fixture
def clock():
    """Provides a FakeClock starting at 2024-01-15T12:00:00Z."""
    return FakeClock(datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def note_service(repository, clock):
    """Provides a NoteService backed by the `repository` fixture and fake clock."""
    return NoteService(repository, clock=clock)


@pytest.fixture
def make_note():
    """
    Provides a factory building Note records for repository tests.

    Usage:
        note = make_note(title="A", updated_at=some_datetime)
    """
    base = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def _make(**overrides) -> Note:
        created_at = overrides.pop("created_at", base)
        fields = {
            "id": uuid.uuid4(),
            "title": "Sample note",
            "content": "Sample content",
            "created_at": created_at,
            "updated_at": created_at,
        }
        fields.update(overrides)
        return Note(**fields)

    return _make


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient talking to a freshly created app, so every
             test starts with an empty note store.
    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from quicknotes.main import create_app
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

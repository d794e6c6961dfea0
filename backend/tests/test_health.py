"""
QuickNotes Backend - Health Endpoint Tests
=============================================

What:  Tests for GET / and GET /health.
"""

import pytest

from quicknotes import __version__


@pytest.mark.asyncio
async def test_root_liveness(test_client):
    response = await test_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Healthy"}


@pytest.mark.asyncio
async def test_health_reports_store_and_count(test_client):
    await test_client.post("/api/notes", json={"title": "one"})
    await test_client.post("/api/notes", json={"title": "two"})

    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == __version__
    assert body["storage"] == "InMemoryNoteRepository"
    assert body["note_count"] == 2
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_openapi_lists_note_routes(test_client):
    response = await test_client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/notes" in paths
    assert "/api/notes/{note_id}" in paths

"""
QuickNotes Backend - Application Package Initializer
====================================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Boundary)         │  ← Validation, timestamping, error mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note dataclass + Pydantic contracts
    ├─────────────────────────────────────┤
    │      Repositories (Note Store)      │  ← Concurrency-safe in-memory storage
    └─────────────────────────────────────┘

    Routes translate HTTP into service calls, services own every business rule,
    and repositories only store and return records.
"""

__version__ = "1.0.0"

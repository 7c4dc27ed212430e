"""
Acme Flavors Backend: Application Package Initializer
=====================================================

What: Marks the `flavors_api` directory as a Python package.
Why:  Enables module imports like `from flavors_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend keeps the same layering for every request:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP status codes, JSON
    ├─────────────────────────────────────┤
    │     Services (Repository + Seed)    │  ← Parameterized queries, Result values
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Engine lifecycle, sessions
    └─────────────────────────────────────┘

    Routes never talk to SQLAlchemy directly; the repository never knows
    about HTTP. The route layer decides which status code a Result becomes.
"""

__version__ = "1.0.0"

"""
Palindrome API — Application Package Initializer
=================================================

What: Marks the `palindrome_api` directory as a Python package.
Who:  Used by uvicorn (`palindrome_api.main:app`), Alembic, and pytest.

Architecture Note:
    The service follows the same layered split at a much smaller scale:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← query/path params → JSON
    ├─────────────────────────────────────┤
    │  Services (predicate + WordStore)   │  ← palindrome check, persistence
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← engine, sessions, schema
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

"""
Sample API: Application Package
=================================

What: REST gateway over the `agents`, `customer` and `orders` tables.
Who:  Imported by uvicorn (`sample_api.main:app`), pytest, and `python -m sample_api`.

Layering:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs, status codes
    ├─────────────────────────────────────┤
    │        Services (one per table)     │  ← validation, one SQL statement
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │      Database (Connection Source)   │  ← pooled async sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

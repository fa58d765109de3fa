"""
Stock Manager Backend — Application Package Initializer
=======================================================

What:  Marks the `stock_manager` directory as a Python package.
Why:   Enables module imports like `from stock_manager.config import settings`.
Who:   Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin CRUD service over the `component_manager` schema:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │ Validation (UUID paths, *In models) │  ← Reject bad input before the store
    ├─────────────────────────────────────┤
    │         Services (CRUD statements)  │  ← One parameterized statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

"""
SocialNet Backend — Application Package Initializer
===================================================

What: Marks the `socialnet` directory as a Python package.
Who:  Used by uvicorn (`socialnet.main:app`), pytest and the `socialnet` console script.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Security (Access Guard, tokens,   │  ← Who is calling, may they write
    │   passwords) + Services             │
    ├─────────────────────────────────────┤
    │           Repositories              │  ← Queries per aggregate
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Services and repositories are built once in `create_app()` and handed to
    routes through FastAPI dependencies; nothing looks them up globally.
"""

__version__ = "1.0.0"

"""
ForumGuard Backend — Application Package Initializer
=====================================================

What: Marks the `forumguard` directory as a Python package.
Why:  Enables module imports like `from forumguard.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin HTTP shell around two stateless analyses:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Validator, Analyzer)    │  ← Pure rules and counting
    ├─────────────────────────────────────┤
    │     Repository port (read-only)     │  ← What the services may ask for
    ├─────────────────────────────────────┤
    │  SQL adapter (async SQLAlchemy)     │  ← Reads Users, Posts, Replies
    └─────────────────────────────────────┘

    The services never see a session or a query. They receive plain
    records from the repository port, which keeps them testable with an
    AsyncMock and independent of the forum's storage engine.
"""

__version__ = "1.0.0"

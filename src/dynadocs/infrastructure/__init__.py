"""Infrastructure layer - External dependencies and implementations.

This layer contains:
- Database adapters (SQLAlchemy)
- In-memory stores
- API routes (FastAPI)

The infrastructure layer implements the store abstractions defined in the
domain layer.
"""

from dynadocs.infrastructure.persistence.database import (
    Base,
    DatabaseManager,
    close_database,
    get_db_manager,
    get_db_session,
    init_database,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
    "get_db_session",
    "init_database",
    "close_database",
]

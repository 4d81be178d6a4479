"""Repositories implementing the domain store abstractions on SQLAlchemy."""

from dynadocs.infrastructure.persistence.repositories.document_repository import (
    DocumentRepository,
)
from dynadocs.infrastructure.persistence.repositories.schema_repository import (
    SchemaRepository,
)

__all__ = [
    "DocumentRepository",
    "SchemaRepository",
]

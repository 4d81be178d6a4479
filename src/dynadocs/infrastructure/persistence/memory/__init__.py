"""In-memory store implementations."""

from dynadocs.infrastructure.persistence.memory.stores import (
    InMemoryDocumentStore,
    InMemorySchemaStore,
)

__all__ = ["InMemoryDocumentStore", "InMemorySchemaStore"]

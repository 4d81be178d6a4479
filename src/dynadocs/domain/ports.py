"""Store abstractions the schema registry and document service depend on."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from dynadocs.domain.entities import CollectionSchema, DynamicDocument


class SchemaStore(ABC):
    """Abstract base class for schema persistence."""

    @abstractmethod
    async def insert_unique(self, schema: CollectionSchema) -> CollectionSchema:
        """Insert a schema, assigning its id and timestamps.

        Raises:
            DuplicateSchemaError: If the collection name is already taken.
        """
        ...

    @abstractmethod
    async def find_by_name(self, collection_name: str) -> CollectionSchema | None:
        """Get a schema by collection name."""
        ...

    @abstractmethod
    async def save(self, schema: CollectionSchema) -> CollectionSchema:
        """Persist changes to an existing schema."""
        ...

    @abstractmethod
    async def delete_by_name(self, collection_name: str) -> None:
        """Delete the schema for a collection name."""
        ...

    @abstractmethod
    async def list_all(self) -> list[CollectionSchema]:
        """List every schema."""
        ...


class DocumentStore(ABC):
    """Abstract base class for document persistence, keyed by collection name."""

    @abstractmethod
    async def insert(self, collection_name: str, document: DynamicDocument) -> DynamicDocument:
        """Insert a document, assigning its id and timestamps."""
        ...

    @abstractmethod
    async def find_by_id(self, collection_name: str, document_id: str) -> DynamicDocument | None:
        """Get a document by id."""
        ...

    @abstractmethod
    async def find_all(self, collection_name: str) -> list[DynamicDocument]:
        """List every document of a collection."""
        ...

    @abstractmethod
    async def find_where(
        self, collection_name: str, filters: dict[str, Any]
    ) -> list[DynamicDocument]:
        """List documents whose data matches every filter by equality."""
        ...

    @abstractmethod
    async def update_fields(
        self,
        collection_name: str,
        document_id: str,
        *,
        data: dict[str, Any],
        updated_at: datetime,
    ) -> int:
        """Replace a document's data and update timestamp.

        Returns:
            Number of documents affected (0 or 1).
        """
        ...

    @abstractmethod
    async def delete_by_id(self, collection_name: str, document_id: str) -> int:
        """Delete a document.

        Returns:
            Number of documents deleted (0 or 1).
        """
        ...

    @abstractmethod
    async def drop_collection(self, collection_name: str) -> None:
        """Delete every document of a collection."""
        ...

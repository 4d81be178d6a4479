"""In-memory implementations of the schema and document stores.

Used by the demo command and by tests. Entities are deep-copied on the way
in and out so callers never share state with the store.
"""

import copy
import uuid
from datetime import datetime
from threading import Lock
from typing import Any

from dynadocs.domain.entities import CollectionSchema, DynamicDocument, utc_now
from dynadocs.domain.exceptions import DuplicateSchemaError, SchemaNotFoundError
from dynadocs.domain.ports import DocumentStore, SchemaStore
from dynadocs.infrastructure.persistence.repositories.document_repository import matches


class InMemorySchemaStore(SchemaStore):
    """Thread-safe in-memory schema store keyed by collection name."""

    def __init__(self) -> None:
        self._schemas: dict[str, CollectionSchema] = {}
        self._lock = Lock()

    async def insert_unique(self, schema: CollectionSchema) -> CollectionSchema:
        with self._lock:
            if schema.collection_name in self._schemas:
                raise DuplicateSchemaError(schema.collection_name)
            stored = copy.deepcopy(schema)
            stored.id = str(uuid.uuid4())
            stored.created_at = stored.updated_at = utc_now()
            self._schemas[stored.collection_name] = stored
            return copy.deepcopy(stored)

    async def find_by_name(self, collection_name: str) -> CollectionSchema | None:
        with self._lock:
            stored = self._schemas.get(collection_name)
            return copy.deepcopy(stored) if stored is not None else None

    async def save(self, schema: CollectionSchema) -> CollectionSchema:
        with self._lock:
            stored = self._schemas.get(schema.collection_name)
            if stored is None:
                raise SchemaNotFoundError(schema.collection_name)
            stored.fields = copy.deepcopy(schema.fields)
            stored.updated_at = schema.updated_at or utc_now()
            return copy.deepcopy(stored)

    async def delete_by_name(self, collection_name: str) -> None:
        with self._lock:
            self._schemas.pop(collection_name, None)

    async def list_all(self) -> list[CollectionSchema]:
        with self._lock:
            return [copy.deepcopy(self._schemas[name]) for name in sorted(self._schemas)]


class InMemoryDocumentStore(DocumentStore):
    """Thread-safe in-memory document store.

    Documents are grouped per collection and kept in insertion order.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, DynamicDocument]] = {}
        self._lock = Lock()

    async def insert(self, collection_name: str, document: DynamicDocument) -> DynamicDocument:
        with self._lock:
            stored = copy.deepcopy(document)
            stored.id = str(uuid.uuid4())
            stored.collection_name = collection_name
            stored.created_at = stored.updated_at = utc_now()
            self._collections.setdefault(collection_name, {})[stored.id] = stored
            return copy.deepcopy(stored)

    async def find_by_id(self, collection_name: str, document_id: str) -> DynamicDocument | None:
        with self._lock:
            stored = self._collections.get(collection_name, {}).get(document_id)
            return copy.deepcopy(stored) if stored is not None else None

    async def find_all(self, collection_name: str) -> list[DynamicDocument]:
        with self._lock:
            return [copy.deepcopy(doc) for doc in self._collections.get(collection_name, {}).values()]

    async def find_where(
        self, collection_name: str, filters: dict[str, Any]
    ) -> list[DynamicDocument]:
        return [doc for doc in await self.find_all(collection_name) if matches(doc.data, filters)]

    async def update_fields(
        self,
        collection_name: str,
        document_id: str,
        *,
        data: dict[str, Any],
        updated_at: datetime,
    ) -> int:
        with self._lock:
            stored = self._collections.get(collection_name, {}).get(document_id)
            if stored is None:
                return 0
            stored.data = copy.deepcopy(data)
            stored.updated_at = updated_at
            return 1

    async def delete_by_id(self, collection_name: str, document_id: str) -> int:
        with self._lock:
            removed = self._collections.get(collection_name, {}).pop(document_id, None)
            return 0 if removed is None else 1

    async def drop_collection(self, collection_name: str) -> None:
        with self._lock:
            self._collections.pop(collection_name, None)

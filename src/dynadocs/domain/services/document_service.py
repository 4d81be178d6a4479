"""Document service: schema and document lifecycle.

Ties the schema registry, the validation engine and the merge engine to a
document store. Every write is validated against the collection's current
schema before anything is persisted.
"""

from typing import Any

from dynadocs.core.logging import get_logger
from dynadocs.domain.entities import (
    CollectionSchema,
    DynamicDocument,
    FieldDefinition,
    utc_now,
)
from dynadocs.domain.exceptions import (
    DocumentNotFoundError,
    SchemaNotFoundError,
    ValidationFailedError,
)
from dynadocs.domain.ports import DocumentStore
from dynadocs.domain.services.document_merger import DocumentMerger
from dynadocs.domain.services.document_validator import DocumentValidator
from dynadocs.domain.services.schema_registry import SchemaRegistry
from dynadocs.domain.services.store_calls import call_store

logger = get_logger(__name__)


class DocumentService:
    """Service exposing schema and document operations.

    Each operation takes plain structured arguments and either returns a
    value or raises a ``DynadocsError`` subclass.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        documents: DocumentStore,
        store_timeout: float | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            registry: The schema registry.
            documents: Document persistence.
            store_timeout: Optional deadline in seconds for each document store call.
        """
        self.registry = registry
        self.documents = documents
        self.store_timeout = store_timeout

    # --- Schemas ---

    async def create_schema(self, schema: CollectionSchema) -> CollectionSchema:
        """Register a new collection schema."""
        return await self.registry.create(schema)

    async def get_schema(self, collection_name: str) -> CollectionSchema | None:
        """Get a collection schema, or None."""
        return await self.registry.get(collection_name)

    async def list_schemas(self) -> list[CollectionSchema]:
        """List every collection schema."""
        return await self.registry.list_all()

    async def update_schema(
        self, collection_name: str, fields: list[FieldDefinition]
    ) -> CollectionSchema:
        """Replace the field list of a collection schema.

        Existing documents are not re-validated; the new fields apply to
        subsequent writes.
        """
        return await self.registry.update(collection_name, fields)

    async def delete_schema(self, collection_name: str) -> bool:
        """Delete a collection schema and all of its documents.

        Deleting an unknown collection is a no-op: no error is raised and no
        documents are dropped.

        Returns:
            True if the collection existed.
        """
        deleted = await self.registry.delete(collection_name)
        if deleted:
            await call_store(self.documents.drop_collection(collection_name), self.store_timeout)
            logger.info("Collection documents dropped", collection_name=collection_name)
        return deleted

    async def schema_exists(self, collection_name: str) -> bool:
        """Check whether a collection schema exists."""
        return await self.registry.exists(collection_name)

    # --- Documents ---

    async def _require_schema(self, collection_name: str) -> CollectionSchema:
        schema = await self.registry.get(collection_name)
        if schema is None:
            raise SchemaNotFoundError(collection_name)
        return schema

    def _check(self, data: dict[str, Any], schema: CollectionSchema, operation: str) -> None:
        violations = DocumentValidator.validate(data, schema)
        if violations:
            logger.info(
                f"Document {operation} rejected: validation errors",
                collection_name=schema.collection_name,
                violation_count=len(violations),
            )
            raise ValidationFailedError(violations)

    async def create_document(
        self, collection_name: str, data: dict[str, Any]
    ) -> DynamicDocument:
        """Validate and store a new document.

        The raw payload is validated first; defaults are injected afterwards.

        Raises:
            SchemaNotFoundError: If the collection has no schema.
            ValidationFailedError: If the payload violates the schema.
        """
        schema = await self._require_schema(collection_name)
        self._check(data, schema, "create")

        document = DynamicDocument(
            collection_name=collection_name,
            data=DocumentMerger.apply_defaults(data, schema.fields),
        )
        created = await call_store(
            self.documents.insert(collection_name, document), self.store_timeout
        )

        logger.info(
            "Document created",
            collection_name=collection_name,
            document_id=created.id,
        )
        return created

    async def get_document(
        self, collection_name: str, document_id: str
    ) -> DynamicDocument | None:
        """Get a document by id, or None."""
        await self._require_schema(collection_name)
        return await call_store(
            self.documents.find_by_id(collection_name, document_id), self.store_timeout
        )

    async def list_documents(self, collection_name: str) -> list[DynamicDocument]:
        """List every document of a collection."""
        await self._require_schema(collection_name)
        return await call_store(self.documents.find_all(collection_name), self.store_timeout)

    async def find_documents(
        self, collection_name: str, filters: dict[str, Any]
    ) -> list[DynamicDocument]:
        """List documents whose data equals every filter value.

        An empty filter mapping lists every document.
        """
        await self._require_schema(collection_name)
        if not filters:
            return await call_store(self.documents.find_all(collection_name), self.store_timeout)
        return await call_store(
            self.documents.find_where(collection_name, filters), self.store_timeout
        )

    async def update_document(
        self, collection_name: str, document_id: str, updates: dict[str, Any]
    ) -> DynamicDocument:
        """Merge updates into a document and store the re-validated result.

        Raises:
            SchemaNotFoundError: If the collection has no schema.
            DocumentNotFoundError: If the document does not exist.
            ValidationFailedError: If the merged data violates the schema.
        """
        schema = await self._require_schema(collection_name)

        existing = await call_store(
            self.documents.find_by_id(collection_name, document_id), self.store_timeout
        )
        if existing is None:
            raise DocumentNotFoundError(collection_name, document_id)

        merged = DocumentMerger.merge_for_update(existing.data, updates)
        self._check(merged, schema, "update")

        affected = await call_store(
            self.documents.update_fields(
                collection_name, document_id, data=merged, updated_at=utc_now()
            ),
            self.store_timeout,
        )
        reloaded = await call_store(
            self.documents.find_by_id(collection_name, document_id), self.store_timeout
        )
        if affected == 0 or reloaded is None:
            # Deleted between the read and the write
            raise DocumentNotFoundError(collection_name, document_id)

        logger.info(
            "Document updated",
            collection_name=collection_name,
            document_id=document_id,
            updated_keys=sorted(updates.keys()),
        )
        return reloaded

    async def delete_document(self, collection_name: str, document_id: str) -> bool:
        """Delete a document.

        Returns:
            True if a document was removed, False if none had that id.
        """
        await self._require_schema(collection_name)
        deleted = await call_store(
            self.documents.delete_by_id(collection_name, document_id), self.store_timeout
        )
        if deleted:
            logger.info(
                "Document deleted",
                collection_name=collection_name,
                document_id=document_id,
            )
        return deleted > 0

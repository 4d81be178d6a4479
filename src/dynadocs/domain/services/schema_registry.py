"""Schema registry: one schema per collection name."""

from dynadocs.core.logging import get_logger
from dynadocs.domain.entities import CollectionSchema, FieldDefinition, utc_now
from dynadocs.domain.exceptions import (
    DuplicateSchemaError,
    InvalidSchemaError,
    SchemaNotFoundError,
)
from dynadocs.domain.ports import SchemaStore
from dynadocs.domain.services.schema_definition_validator import SchemaDefinitionValidator
from dynadocs.domain.services.store_calls import call_store

logger = get_logger(__name__)


class SchemaRegistry:
    """Holds the schema of every collection.

    The registry is the single source of truth for what a valid document
    looks like in each collection. Name uniqueness is ultimately enforced by
    the store's ``insert_unique``, so concurrent creates for one name cannot
    both succeed.
    """

    def __init__(self, store: SchemaStore, store_timeout: float | None = None) -> None:
        """Initialize the registry.

        Args:
            store: Schema persistence.
            store_timeout: Optional deadline in seconds for each store call.
        """
        self.store = store
        self.store_timeout = store_timeout

    async def create(self, schema: CollectionSchema) -> CollectionSchema:
        """Register a new collection schema.

        Raises:
            InvalidSchemaError: If the definition is malformed.
            DuplicateSchemaError: If the collection name is taken.
        """
        errors = SchemaDefinitionValidator.validate(schema)
        if errors:
            raise InvalidSchemaError(errors)

        existing = await call_store(
            self.store.find_by_name(schema.collection_name), self.store_timeout
        )
        if existing is not None:
            raise DuplicateSchemaError(schema.collection_name)

        created = await call_store(self.store.insert_unique(schema), self.store_timeout)
        logger.info(
            "Collection schema created",
            collection_name=created.collection_name,
            schema_id=created.id,
            field_count=len(created.fields),
            created_by=created.created_by,
        )
        return created

    async def get(self, collection_name: str) -> CollectionSchema | None:
        """Get the schema of a collection, or None if there is none."""
        return await call_store(self.store.find_by_name(collection_name), self.store_timeout)

    async def exists(self, collection_name: str) -> bool:
        """Check whether a collection has a schema."""
        return await self.get(collection_name) is not None

    async def update(
        self, collection_name: str, fields: list[FieldDefinition]
    ) -> CollectionSchema:
        """Replace the field list of an existing schema.

        Name, id and creation metadata are kept.

        Raises:
            InvalidSchemaError: If the new field list is malformed.
            SchemaNotFoundError: If the collection has no schema.
        """
        errors = SchemaDefinitionValidator.validate_fields(fields)
        if errors:
            raise InvalidSchemaError(errors)

        schema = await self.get(collection_name)
        if schema is None:
            raise SchemaNotFoundError(collection_name)

        schema.fields = list(fields)
        schema.updated_at = utc_now()
        updated = await call_store(self.store.save(schema), self.store_timeout)

        logger.info(
            "Collection schema updated",
            collection_name=collection_name,
            field_count=len(updated.fields),
        )
        return updated

    async def delete(self, collection_name: str) -> bool:
        """Remove the schema of a collection if it has one.

        Returns:
            True if a schema was found and removed, False otherwise.
        """
        schema = await self.get(collection_name)
        if schema is None:
            logger.debug("Schema delete skipped: not found", collection_name=collection_name)
            return False

        await call_store(self.store.delete_by_name(collection_name), self.store_timeout)
        logger.info("Collection schema deleted", collection_name=collection_name)
        return True

    async def list_all(self) -> list[CollectionSchema]:
        """List every registered schema."""
        return await call_store(self.store.list_all(), self.store_timeout)

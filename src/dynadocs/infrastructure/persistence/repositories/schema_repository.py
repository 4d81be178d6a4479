"""Repository for collection schema operations.

Provides CRUD operations for the collection_schemas table.
"""

import json
import uuid

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dynadocs.domain.entities import CollectionSchema, FieldDefinition, utc_now
from dynadocs.domain.exceptions import DuplicateSchemaError, SchemaNotFoundError
from dynadocs.domain.ports import SchemaStore
from dynadocs.infrastructure.persistence.models import CollectionSchemaModel
from dynadocs.infrastructure.persistence.repositories.store_errors import (
    as_utc,
    store_errors,
)


class SchemaRepository(SchemaStore):
    """Repository for collection schema database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    @staticmethod
    def _to_entity(model: CollectionSchemaModel) -> CollectionSchema:
        return CollectionSchema(
            id=model.id,
            collection_name=model.collection_name,
            fields=[FieldDefinition.from_dict(raw) for raw in json.loads(model.fields)],
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            created_by=model.created_by,
        )

    @staticmethod
    def _dump_fields(schema: CollectionSchema) -> str:
        return json.dumps([f.to_dict() for f in schema.fields])

    async def _get_model(self, collection_name: str) -> CollectionSchemaModel | None:
        result = await self.session.execute(
            select(CollectionSchemaModel).where(
                CollectionSchemaModel.collection_name == collection_name
            )
        )
        return result.scalar_one_or_none()

    async def insert_unique(self, schema: CollectionSchema) -> CollectionSchema:
        """Insert a new schema.

        The unique index on collection_name settles concurrent inserts.

        Args:
            schema: The schema to insert.

        Returns:
            The stored schema with id and timestamps assigned.

        Raises:
            DuplicateSchemaError: If the collection name is already taken.
        """
        now = utc_now()
        model = CollectionSchemaModel(
            id=str(uuid.uuid4()),
            collection_name=schema.collection_name,
            fields=self._dump_fields(schema),
            created_at=now,
            updated_at=now,
            created_by=schema.created_by,
        )
        async with store_errors("insert_schema"):
            self.session.add(model)
            try:
                await self.session.flush()
            except IntegrityError as e:
                await self.session.rollback()
                raise DuplicateSchemaError(schema.collection_name) from e
        return self._to_entity(model)

    async def find_by_name(self, collection_name: str) -> CollectionSchema | None:
        """Get a schema by collection name.

        Args:
            collection_name: The collection name.

        Returns:
            The schema if found, None otherwise.
        """
        async with store_errors("find_schema"):
            model = await self._get_model(collection_name)
        return self._to_entity(model) if model is not None else None

    async def save(self, schema: CollectionSchema) -> CollectionSchema:
        """Persist the field list and update timestamp of an existing schema.

        Raises:
            SchemaNotFoundError: If the schema was removed in the meantime.
        """
        async with store_errors("save_schema"):
            model = await self._get_model(schema.collection_name)
            if model is None:
                raise SchemaNotFoundError(schema.collection_name)
            model.fields = self._dump_fields(schema)
            model.updated_at = schema.updated_at or utc_now()
            await self.session.flush()
        return self._to_entity(model)

    async def delete_by_name(self, collection_name: str) -> None:
        """Delete the schema of a collection.

        Args:
            collection_name: The collection name.
        """
        async with store_errors("delete_schema"):
            await self.session.execute(
                delete(CollectionSchemaModel).where(
                    CollectionSchemaModel.collection_name == collection_name
                )
            )
            await self.session.flush()

    async def list_all(self) -> list[CollectionSchema]:
        """List every schema, ordered by collection name."""
        async with store_errors("list_schemas"):
            result = await self.session.execute(
                select(CollectionSchemaModel).order_by(CollectionSchemaModel.collection_name)
            )
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

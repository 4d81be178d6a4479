"""Repository for dynamic document operations.

Documents of all collections share one table; the data payload is JSON text.
Equality filters are applied in Python after loading the collection's rows,
which keeps boolean and numeric comparison identical across backends.
"""

import json
import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dynadocs.core.logging import get_logger
from dynadocs.domain.entities import DynamicDocument, utc_now
from dynadocs.domain.ports import DocumentStore
from dynadocs.domain.services.values import values_equal
from dynadocs.infrastructure.persistence.models import DocumentModel
from dynadocs.infrastructure.persistence.repositories.store_errors import (
    as_utc,
    store_errors,
)

logger = get_logger(__name__)


def matches(data: dict[str, Any], filters: dict[str, Any]) -> bool:
    """Whether a document's data equals every filter value.

    A filter on an absent key never matches.
    """
    return all(
        key in data and values_equal(data[key], expected) for key, expected in filters.items()
    )


class DocumentRepository(DocumentStore):
    """Repository for dynamic document database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    @staticmethod
    def _to_entity(model: DocumentModel) -> DynamicDocument:
        return DynamicDocument(
            id=model.id,
            collection_name=model.collection_name,
            data=json.loads(model.data),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def _select(self, collection_name: str) -> list[DocumentModel]:
        result = await self.session.execute(
            select(DocumentModel)
            .where(DocumentModel.collection_name == collection_name)
            .order_by(DocumentModel.created_at, DocumentModel.id)
        )
        return list(result.scalars().all())

    async def insert(self, collection_name: str, document: DynamicDocument) -> DynamicDocument:
        """Insert a new document.

        Args:
            collection_name: The collection name.
            document: The document to insert; its data must already be validated.

        Returns:
            The stored document with id and timestamps assigned.
        """
        now = utc_now()
        model = DocumentModel(
            id=str(uuid.uuid4()),
            collection_name=collection_name,
            data=json.dumps(document.data),
            created_at=now,
            updated_at=now,
        )
        async with store_errors("insert_document"):
            self.session.add(model)
            await self.session.flush()

        logger.debug("Document row inserted", collection_name=collection_name, document_id=model.id)
        return self._to_entity(model)

    async def find_by_id(self, collection_name: str, document_id: str) -> DynamicDocument | None:
        """Get a document by id within a collection.

        Returns:
            The document if found, None otherwise.
        """
        async with store_errors("find_document"):
            result = await self.session.execute(
                select(DocumentModel)
                .where(
                    DocumentModel.collection_name == collection_name,
                    DocumentModel.id == document_id,
                )
                .execution_options(populate_existing=True)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_all(self, collection_name: str) -> list[DynamicDocument]:
        """List every document of a collection in insertion order."""
        async with store_errors("list_documents"):
            models = await self._select(collection_name)
        return [self._to_entity(model) for model in models]

    async def find_where(
        self, collection_name: str, filters: dict[str, Any]
    ) -> list[DynamicDocument]:
        """List documents whose data equals every filter value.

        Args:
            collection_name: The collection name.
            filters: Field name to expected value.
        """
        documents = await self.find_all(collection_name)
        return [doc for doc in documents if matches(doc.data, filters)]

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
            Number of rows updated (0 or 1).
        """
        async with store_errors("update_document"):
            result = await self.session.execute(
                update(DocumentModel)
                .where(
                    DocumentModel.collection_name == collection_name,
                    DocumentModel.id == document_id,
                )
                .values(data=json.dumps(data), updated_at=updated_at)
            )
            await self.session.flush()
        return result.rowcount

    async def delete_by_id(self, collection_name: str, document_id: str) -> int:
        """Delete a document.

        Returns:
            Number of rows deleted (0 or 1).
        """
        async with store_errors("delete_document"):
            result = await self.session.execute(
                delete(DocumentModel).where(
                    DocumentModel.collection_name == collection_name,
                    DocumentModel.id == document_id,
                )
            )
            await self.session.flush()
        return result.rowcount

    async def drop_collection(self, collection_name: str) -> None:
        """Delete every document of a collection."""
        async with store_errors("drop_collection"):
            result = await self.session.execute(
                delete(DocumentModel).where(DocumentModel.collection_name == collection_name)
            )
            await self.session.flush()
        logger.debug(
            "Collection rows deleted",
            collection_name=collection_name,
            row_count=result.rowcount,
        )

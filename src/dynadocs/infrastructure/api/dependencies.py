"""FastAPI dependencies.

Builds the document service on top of the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dynadocs.core.config import get_settings
from dynadocs.domain.services import DocumentService, SchemaRegistry
from dynadocs.infrastructure.persistence.database import get_db_session
from dynadocs.infrastructure.persistence.repositories import (
    DocumentRepository,
    SchemaRepository,
)


async def get_document_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> DocumentService:
    """Create a document service bound to the request session."""
    timeout = get_settings().store_timeout_seconds
    registry = SchemaRegistry(SchemaRepository(session), store_timeout=timeout)
    return DocumentService(registry, DocumentRepository(session), store_timeout=timeout)


# Type aliases for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Service = Annotated[DocumentService, Depends(get_document_service)]

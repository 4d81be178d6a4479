"""Document API routes.

Provides CRUD endpoints for documents of a schema-backed collection. The
collection name comes from the URL path.
"""

from typing import Any

from fastapi import APIRouter, Body, Request, status

from dynadocs.core.logging import get_logger
from dynadocs.domain.exceptions import DocumentNotFoundError
from dynadocs.domain.services import coerce_filter_value
from dynadocs.infrastructure.api.dependencies import DbSession, Service
from dynadocs.infrastructure.api.schemas import DocumentResponse, MessageResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/{collection_name}/documents",
    status_code=status.HTTP_201_CREATED,
    response_model=DocumentResponse,
    responses={
        400: {"description": "Validation error"},
        404: {"description": "Collection schema not found"},
    },
)
async def create_document(
    collection_name: str,
    service: Service,
    session: DbSession,
    data: dict[str, Any] = Body(...),
) -> DocumentResponse:
    """Validate and store a new document."""
    created = await service.create_document(collection_name, data)
    await session.commit()
    return DocumentResponse.from_entity(created)


@router.get(
    "/{collection_name}/documents",
    response_model=list[DocumentResponse],
    responses={404: {"description": "Collection schema not found"}},
)
async def list_documents(
    collection_name: str,
    request: Request,
    service: Service,
) -> list[DocumentResponse]:
    """List documents of a collection.

    Every query parameter is an equality filter on the field of the same
    name. Values are converted to the field's declared type when they parse
    (``?active=true`` matches the boolean ``true``).
    """
    params = dict(request.query_params)
    if params:
        schema = await service.get_schema(collection_name)
        filters = {}
        for name, raw in params.items():
            definition = schema.field_named(name) if schema is not None else None
            filters[name] = coerce_filter_value(
                definition.type if definition is not None else None, raw
            )
        documents = await service.find_documents(collection_name, filters)
    else:
        documents = await service.list_documents(collection_name)

    logger.debug(
        "Documents listed",
        collection_name=collection_name,
        filter_keys=sorted(params),
        count=len(documents),
    )
    return [DocumentResponse.from_entity(document) for document in documents]


@router.get(
    "/{collection_name}/documents/{document_id}",
    response_model=DocumentResponse,
    responses={404: {"description": "Collection schema or document not found"}},
)
async def get_document(
    collection_name: str,
    document_id: str,
    service: Service,
) -> DocumentResponse:
    """Get a document by id."""
    document = await service.get_document(collection_name, document_id)
    if document is None:
        raise DocumentNotFoundError(collection_name, document_id)
    return DocumentResponse.from_entity(document)


@router.put(
    "/{collection_name}/documents/{document_id}",
    response_model=DocumentResponse,
    responses={
        400: {"description": "Validation error"},
        404: {"description": "Collection schema or document not found"},
    },
)
async def update_document(
    collection_name: str,
    document_id: str,
    service: Service,
    session: DbSession,
    updates: dict[str, Any] = Body(...),
) -> DocumentResponse:
    """Merge the given fields into a document.

    Keys not present in the body keep their stored values.
    """
    updated = await service.update_document(collection_name, document_id, updates)
    await session.commit()
    return DocumentResponse.from_entity(updated)


@router.delete(
    "/{collection_name}/documents/{document_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Collection schema or document not found"}},
)
async def delete_document(
    collection_name: str,
    document_id: str,
    service: Service,
    session: DbSession,
) -> MessageResponse:
    """Delete a document."""
    deleted = await service.delete_document(collection_name, document_id)
    if not deleted:
        raise DocumentNotFoundError(collection_name, document_id)
    await session.commit()
    return MessageResponse(message="Document deleted successfully")

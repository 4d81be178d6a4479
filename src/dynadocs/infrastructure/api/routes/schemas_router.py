"""Collection schema API routes.

Provides endpoints for registering, reading, replacing and deleting
collection schemas.
"""

from fastapi import APIRouter, status

from dynadocs.core.logging import get_logger
from dynadocs.domain.exceptions import SchemaNotFoundError
from dynadocs.infrastructure.api.dependencies import DbSession, Service
from dynadocs.infrastructure.api.schemas import (
    CreateSchemaRequest,
    MessageResponse,
    SchemaExistsResponse,
    SchemaResponse,
    UpdateSchemaRequest,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SchemaResponse,
    responses={
        400: {"description": "Malformed schema definition"},
        409: {"description": "Collection schema already exists"},
    },
)
async def create_schema(
    request: CreateSchemaRequest,
    service: Service,
    session: DbSession,
) -> SchemaResponse:
    """Register a new collection schema."""
    created = await service.create_schema(request.to_entity())
    await session.commit()
    return SchemaResponse.from_entity(created)


@router.get("", response_model=list[SchemaResponse])
async def list_schemas(service: Service) -> list[SchemaResponse]:
    """List every collection schema."""
    schemas = await service.list_schemas()
    logger.debug("Schemas listed", count=len(schemas))
    return [SchemaResponse.from_entity(schema) for schema in schemas]


@router.get(
    "/{collection_name}",
    response_model=SchemaResponse,
    responses={404: {"description": "Schema not found"}},
)
async def get_schema(collection_name: str, service: Service) -> SchemaResponse:
    """Get the schema of a collection."""
    schema = await service.get_schema(collection_name)
    if schema is None:
        raise SchemaNotFoundError(collection_name)
    return SchemaResponse.from_entity(schema)


@router.put(
    "/{collection_name}",
    response_model=SchemaResponse,
    responses={
        400: {"description": "Malformed field definitions"},
        404: {"description": "Schema not found"},
    },
)
async def update_schema(
    collection_name: str,
    request: UpdateSchemaRequest,
    service: Service,
    session: DbSession,
) -> SchemaResponse:
    """Replace the field list of a collection schema.

    Documents already stored are not re-validated.
    """
    updated = await service.update_schema(collection_name, request.field_entities())
    await session.commit()
    return SchemaResponse.from_entity(updated)


@router.delete("/{collection_name}", response_model=MessageResponse)
async def delete_schema(
    collection_name: str,
    service: Service,
    session: DbSession,
) -> MessageResponse:
    """Delete a collection schema and every document in it.

    Deleting an unknown collection succeeds without effect.
    """
    await service.delete_schema(collection_name)
    await session.commit()
    return MessageResponse(message="Schema deleted successfully")


@router.get("/{collection_name}/exists", response_model=SchemaExistsResponse)
async def schema_exists(collection_name: str, service: Service) -> SchemaExistsResponse:
    """Check whether a collection schema exists."""
    exists = await service.schema_exists(collection_name)
    return SchemaExistsResponse(exists=exists, collection_name=collection_name)

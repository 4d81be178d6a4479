"""Pydantic request/response schemas for the API."""

from dynadocs.infrastructure.api.schemas.document_payloads import (
    DocumentResponse,
    MessageResponse,
)
from dynadocs.infrastructure.api.schemas.schema_payloads import (
    CamelModel,
    CreateSchemaRequest,
    FieldDefinitionPayload,
    FieldDefinitionResponse,
    SchemaExistsResponse,
    SchemaResponse,
    UpdateSchemaRequest,
)

__all__ = [
    "CamelModel",
    "CreateSchemaRequest",
    "DocumentResponse",
    "FieldDefinitionPayload",
    "FieldDefinitionResponse",
    "MessageResponse",
    "SchemaExistsResponse",
    "SchemaResponse",
    "UpdateSchemaRequest",
]

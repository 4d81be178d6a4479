"""Pydantic schemas for document endpoints."""

from datetime import datetime
from typing import Any

from pydantic import Field

from dynadocs.domain.entities import DynamicDocument
from dynadocs.infrastructure.api.schemas.schema_payloads import CamelModel


class DocumentResponse(CamelModel):
    """Response for a created or retrieved document."""

    id: str | None = Field(..., description="Document ID (UUID)")
    collection_name: str = Field(..., description="Owning collection")
    data: dict[str, Any] = Field(..., description="Document fields")
    created_at: datetime | None = Field(..., description="When the document was created")
    updated_at: datetime | None = Field(..., description="When the document was last updated")

    @classmethod
    def from_entity(cls, document: DynamicDocument) -> "DocumentResponse":
        return cls(
            id=document.id,
            collection_name=document.collection_name,
            data=document.data,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


class MessageResponse(CamelModel):
    """Plain confirmation message."""

    message: str

"""Collection schema entity.

A collection schema names a collection and lists the field definitions that
every document stored in it is validated against.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from dynadocs.domain.entities.field_definition import FieldDefinition


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class CollectionSchema:
    """Schema definition for a dynamic collection.

    Attributes:
        collection_name: Unique collection name; the schema's identity.
        fields: Ordered field definitions.
        id: Store-assigned identifier (None until persisted).
        created_at: Timestamp when the schema was created.
        updated_at: Timestamp when the field list was last replaced.
        created_by: Identity of the creator, if known.
    """

    collection_name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: str | None = None

    def field_named(self, name: str) -> FieldDefinition | None:
        """Return the top-level field definition with the given name."""
        for definition in self.fields:
            if definition.name == name:
                return definition
        return None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CollectionSchema":
        """Build a schema from its wire form (``collectionName`` + ``fields``)."""
        return cls(
            collection_name=raw.get("collectionName", raw.get("collection_name")) or "",
            fields=[FieldDefinition.from_dict(f) for f in raw.get("fields") or []],
            created_by=raw.get("createdBy", raw.get("created_by")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the schema in its wire form."""
        return {
            "id": self.id,
            "collectionName": self.collection_name,
            "fields": [f.to_dict() for f in self.fields],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "createdBy": self.created_by,
        }

"""Pydantic schemas for collection schema endpoints.

Wire names are camelCase (``collectionName``, ``defaultValue``,
``nestedFields``); snake_case is accepted on input as well.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dynadocs.domain.entities import (
    CollectionSchema,
    FieldDefinition,
    FieldType,
    constraints_to_mapping,
    parse_constraints,
)


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldDefinitionPayload(CamelModel):
    """Definition of a single field in a collection schema.

    Names and types are checked by the schema registry rather than here, so
    a malformed definition is reported with every other definition error.
    """

    name: str = Field(default="", description="Field name")
    type: str = Field(
        default="",
        description="Field type: STRING, INTEGER, DOUBLE, BOOLEAN, DATE, OBJECT, ARRAY",
    )
    required: bool = Field(default=False, description="Whether the field is required")
    default_value: Any = Field(default=None, description="Value injected when absent on create")
    validation: dict[str, Any] | None = Field(
        default=None,
        description="Constraints: minLength, maxLength, min, max",
    )
    nested_fields: list["FieldDefinitionPayload"] | None = Field(
        default=None,
        description="Child fields (OBJECT fields only)",
    )

    def to_entity(self) -> FieldDefinition:
        """Convert to a domain field definition.

        Raises:
            InvalidSchemaError: If the type or a constraint is malformed.
        """
        return FieldDefinition(
            name=self.name,
            type=FieldType.parse(self.type),
            required=self.required,
            default_value=self.default_value,
            constraints=parse_constraints(self.validation, self.name),
            nested_fields=(
                [child.to_entity() for child in self.nested_fields]
                if self.nested_fields is not None
                else None
            ),
        )


class CreateSchemaRequest(CamelModel):
    """Request body for creating a collection schema."""

    collection_name: str = Field(default="", description="Unique collection name")
    fields: list[FieldDefinitionPayload] = Field(
        default_factory=list,
        description="Ordered field definitions",
    )
    created_by: str | None = Field(default=None, description="Creator identity")

    def to_entity(self) -> CollectionSchema:
        """Convert to a domain schema."""
        return CollectionSchema(
            collection_name=self.collection_name,
            fields=[f.to_entity() for f in self.fields],
            created_by=self.created_by,
        )


class UpdateSchemaRequest(CamelModel):
    """Request body for replacing a schema's field list.

    A ``collectionName`` in the body is ignored; the path names the schema.
    """

    collection_name: str | None = Field(default=None, description="Ignored")
    fields: list[FieldDefinitionPayload] = Field(..., description="New field definitions")

    def field_entities(self) -> list[FieldDefinition]:
        """Convert the field list to domain definitions."""
        return [f.to_entity() for f in self.fields]


class FieldDefinitionResponse(CamelModel):
    """Field definition in schema responses."""

    name: str
    type: str
    required: bool = False
    default_value: Any = None
    validation: dict[str, Any] | None = None
    nested_fields: list["FieldDefinitionResponse"] | None = None

    @classmethod
    def from_entity(cls, definition: FieldDefinition) -> "FieldDefinitionResponse":
        return cls(
            name=definition.name,
            type=definition.type.value,
            required=definition.required,
            default_value=definition.default_value,
            validation=constraints_to_mapping(definition.constraints) or None,
            nested_fields=(
                [cls.from_entity(child) for child in definition.nested_fields]
                if definition.nested_fields is not None
                else None
            ),
        )


class SchemaResponse(CamelModel):
    """Response for a collection schema."""

    id: str | None = Field(..., description="Schema ID (UUID)")
    collection_name: str = Field(..., description="Collection name")
    fields: list[FieldDefinitionResponse] = Field(..., description="Field definitions")
    created_at: datetime | None = Field(..., description="When the schema was created")
    updated_at: datetime | None = Field(..., description="When the field list was last replaced")
    created_by: str | None = Field(default=None, description="Creator identity")

    @classmethod
    def from_entity(cls, schema: CollectionSchema) -> "SchemaResponse":
        return cls(
            id=schema.id,
            collection_name=schema.collection_name,
            fields=[FieldDefinitionResponse.from_entity(f) for f in schema.fields],
            created_at=schema.created_at,
            updated_at=schema.updated_at,
            created_by=schema.created_by,
        )


class SchemaExistsResponse(CamelModel):
    """Response for the schema existence check."""

    exists: bool
    collection_name: str

"""Unit tests for API request/response models."""

import pytest

from dynadocs.domain.entities import CollectionSchema, FieldDefinition, FieldType, MinLength
from dynadocs.domain.exceptions import InvalidSchemaError
from dynadocs.infrastructure.api.schemas import (
    CreateSchemaRequest,
    FieldDefinitionPayload,
    SchemaResponse,
)


class TestFieldDefinitionPayload:

    def test_to_entity(self):
        payload = FieldDefinitionPayload.model_validate(
            {
                "name": "address",
                "type": "object",
                "nestedFields": [
                    {"name": "city", "type": "STRING", "validation": {"minLength": 1}}
                ],
            }
        )

        definition = payload.to_entity()

        assert definition.type is FieldType.OBJECT
        assert definition.nested_fields[0].constraints == (MinLength(1),)

    def test_bad_constraint(self):
        payload = FieldDefinitionPayload(name="x", type="STRING", validation={"minLength": -1})

        with pytest.raises(InvalidSchemaError):
            payload.to_entity()


class TestSchemaPayloads:

    def test_create_request(self, products_payload):
        schema = CreateSchemaRequest.model_validate(products_payload).to_entity()

        assert schema.collection_name == "products"
        assert schema.field_named("category").default_value == "general"

    def test_response_uses_camel_case(self):
        schema = CollectionSchema(
            collection_name="notes",
            fields=[FieldDefinition(name="body", type=FieldType.STRING)],
            id="abc",
        )

        dumped = SchemaResponse.from_entity(schema).model_dump(by_alias=True)

        assert dumped["collectionName"] == "notes"
        assert dumped["fields"][0] == {
            "name": "body",
            "type": "STRING",
            "required": False,
            "defaultValue": None,
            "validation": None,
            "nestedFields": None,
        }

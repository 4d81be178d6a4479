"""Unit tests for SchemaDefinitionValidator."""

from dynadocs.domain.entities import CollectionSchema, FieldDefinition, FieldType
from dynadocs.domain.services.schema_definition_validator import SchemaDefinitionValidator


class TestSchemaDefinitionValidator:

    def test_valid_schema(self, products_schema):
        assert SchemaDefinitionValidator.validate(products_schema) == []

    def test_collection_name_required(self):
        assert SchemaDefinitionValidator.validate_collection_name("") == [
            "Collection name is required"
        ]
        assert SchemaDefinitionValidator.validate_collection_name("   ") == [
            "Collection name is required"
        ]

    def test_collection_name_too_long(self):
        errors = SchemaDefinitionValidator.validate_collection_name("c" * 65)
        assert errors == ["Collection name must be at most 64 characters"]

    def test_empty_field_list_is_allowed(self):
        assert SchemaDefinitionValidator.validate(CollectionSchema(collection_name="bare")) == []

    def test_field_name_required(self):
        errors = SchemaDefinitionValidator.validate_fields(
            [FieldDefinition(name="", type=FieldType.STRING)]
        )
        assert errors == ["fields[0]: Field name is required"]

    def test_duplicate_field_names(self):
        errors = SchemaDefinitionValidator.validate_fields(
            [
                FieldDefinition(name="a", type=FieldType.STRING),
                FieldDefinition(name="a", type=FieldType.INTEGER),
            ]
        )
        assert errors == ["fields[1]: Duplicate field name 'a'"]

    def test_nested_fields_only_on_objects(self):
        errors = SchemaDefinitionValidator.validate_fields(
            [
                FieldDefinition(
                    name="tags",
                    type=FieldType.ARRAY,
                    nested_fields=[FieldDefinition(name="x", type=FieldType.STRING)],
                )
            ]
        )
        assert errors == ["fields[0]: Nested fields are only allowed on OBJECT fields"]

    def test_nested_fields_are_checked(self):
        errors = SchemaDefinitionValidator.validate_fields(
            [
                FieldDefinition(
                    name="address",
                    type=FieldType.OBJECT,
                    nested_fields=[
                        FieldDefinition(name="city", type=FieldType.STRING),
                        FieldDefinition(name="city", type=FieldType.STRING),
                    ],
                )
            ]
        )
        assert errors == ["address.fields[1]: Duplicate field name 'city'"]

    def test_all_errors_are_reported(self):
        schema = CollectionSchema(
            collection_name="",
            fields=[FieldDefinition(name="", type=FieldType.STRING)],
        )
        assert SchemaDefinitionValidator.validate(schema) == [
            "Collection name is required",
            "fields[0]: Field name is required",
        ]

"""Unit tests for DocumentValidator."""

import pytest

from dynadocs.domain.entities import (
    CollectionSchema,
    FieldDefinition,
    FieldType,
    Max,
    MaxLength,
    Min,
    MinLength,
)
from dynadocs.domain.services.document_validator import DocumentValidator


def schema_with(*fields: FieldDefinition) -> CollectionSchema:
    return CollectionSchema(collection_name="things", fields=list(fields))


class TestTypeChecks:

    def test_string(self):
        assert DocumentValidator.check_string("hello", "f") is None
        assert DocumentValidator.check_string(5, "f") == "Field 'f' must be a string"

    def test_integer(self):
        assert DocumentValidator.check_integer(5, "f") is None
        assert DocumentValidator.check_integer("5", "f") is None
        assert DocumentValidator.check_integer(5.5, "f") == "Field 'f' must be an integer"
        assert DocumentValidator.check_integer(True, "f") == "Field 'f' must be an integer"

    def test_double(self):
        assert DocumentValidator.check_double(5, "f") is None
        assert DocumentValidator.check_double("5.5", "f") is None
        assert DocumentValidator.check_double("abc", "f") == "Field 'f' must be a number"

    def test_boolean(self):
        assert DocumentValidator.check_boolean(False, "f") is None
        assert DocumentValidator.check_boolean("TRUE", "f") is None
        assert DocumentValidator.check_boolean("yes", "f") == "Field 'f' must be a boolean"

    @pytest.mark.parametrize("field_type", [FieldType.DATE, FieldType.OBJECT, FieldType.ARRAY])
    def test_unchecked_types(self, field_type):
        assert DocumentValidator.check_type(12345, field_type, "f") is None


class TestRequired:

    def test_missing_required_field(self):
        schema = schema_with(FieldDefinition(name="x", type=FieldType.STRING, required=True))
        assert DocumentValidator.validate({}, schema) == ["Field 'x' is required"]

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_count_as_missing(self, value):
        schema = schema_with(FieldDefinition(name="x", type=FieldType.STRING, required=True))
        assert DocumentValidator.validate({"x": value}, schema) == ["Field 'x' is required"]

    @pytest.mark.parametrize("value", [0, False])
    def test_falsy_values_are_present(self, value):
        schema = schema_with(FieldDefinition(name="x", type=FieldType.DOUBLE, required=True))
        errors = DocumentValidator.validate({"x": value}, schema)
        assert "Field 'x' is required" not in errors

    def test_required_stops_further_checks(self):
        schema = schema_with(
            FieldDefinition(
                name="x", type=FieldType.STRING, required=True, constraints=(MinLength(3),)
            )
        )
        assert DocumentValidator.validate({"x": ""}, schema) == ["Field 'x' is required"]

    def test_optional_absent_field_is_skipped(self):
        schema = schema_with(
            FieldDefinition(name="x", type=FieldType.INTEGER, constraints=(Min(10.0),))
        )
        assert DocumentValidator.validate({}, schema) == []
        assert DocumentValidator.validate({"x": None}, schema) == []


class TestConstraints:

    def test_length_bounds(self):
        schema = schema_with(
            FieldDefinition(
                name="name", type=FieldType.STRING, constraints=(MinLength(2), MaxLength(4))
            )
        )
        assert DocumentValidator.validate({"name": "a"}, schema) == [
            "Field 'name' must be at least 2 characters"
        ]
        assert DocumentValidator.validate({"name": "abcde"}, schema) == [
            "Field 'name' must be at most 4 characters"
        ]
        assert DocumentValidator.validate({"name": "abc"}, schema) == []

    def test_numeric_bounds_render_as_floats(self):
        schema = schema_with(
            FieldDefinition(
                name="qty", type=FieldType.INTEGER, constraints=(Min(1.0), Max(10.0))
            )
        )
        assert DocumentValidator.validate({"qty": 0}, schema) == [
            "Field 'qty' must be at least 1.0"
        ]
        assert DocumentValidator.validate({"qty": 11}, schema) == [
            "Field 'qty' must be at most 10.0"
        ]

    def test_bounds_are_inclusive(self):
        schema = schema_with(
            FieldDefinition(name="p", type=FieldType.DOUBLE, constraints=(Min(0.0), Max(1.0)))
        )
        assert DocumentValidator.validate({"p": 0}, schema) == []
        assert DocumentValidator.validate({"p": 1.0}, schema) == []

    def test_huge_integers_are_compared_exactly(self):
        schema = schema_with(
            FieldDefinition(name="p", type=FieldType.DOUBLE),
            FieldDefinition(name="q", type=FieldType.INTEGER, constraints=(Min(0.0), Max(1e7))),
        )
        assert DocumentValidator.validate({"p": 10**400, "q": 10**400}, schema) == [
            "Field 'q' must be at most 1.0E7"
        ]
        assert DocumentValidator.validate({"q": -(10**400)}, schema) == [
            "Field 'q' must be at least 0.0"
        ]

    def test_integer_strings_must_be_bare_digits(self):
        schema = schema_with(FieldDefinition(name="q", type=FieldType.INTEGER))
        assert DocumentValidator.validate({"q": "12\n"}, schema) == [
            "Field 'q' must be an integer"
        ]

    def test_constraints_of_another_kind_are_skipped(self):
        schema = schema_with(
            FieldDefinition(name="n", type=FieldType.STRING, constraints=(MinLength(3),))
        )
        # Type error only; the length rule does not apply to a number
        assert DocumentValidator.validate({"n": 5}, schema) == ["Field 'n' must be a string"]

    def test_numeric_strings_skip_numeric_bounds(self):
        schema = schema_with(
            FieldDefinition(name="n", type=FieldType.INTEGER, constraints=(Min(20.0),))
        )
        assert DocumentValidator.validate({"n": "12"}, schema) == []

    def test_constraints_run_after_a_type_failure(self):
        schema = schema_with(
            FieldDefinition(name="n", type=FieldType.INTEGER, constraints=(Min(10.0),))
        )
        assert DocumentValidator.validate({"n": 2.5}, schema) == [
            "Field 'n' must be an integer",
            "Field 'n' must be at least 10.0",
        ]


class TestValidateDocument:

    def test_products_negative_price(self, products_schema):
        errors = DocumentValidator.validate({"name": "Laptop", "price": -5}, products_schema)
        assert errors == ["Field 'price' must be at least 0.0"]

    def test_products_valid(self, products_schema):
        assert DocumentValidator.validate({"name": "Laptop", "price": 999.99}, products_schema) == []

    def test_errors_follow_field_order(self, products_schema):
        errors = DocumentValidator.validate({"name": "L", "price": "cheap"}, products_schema)
        assert errors == [
            "Field 'name' must be at least 2 characters",
            "Field 'price' must be a number",
        ]

    def test_undeclared_keys_are_ignored(self, products_schema):
        data = {"name": "Laptop", "price": 1, "colour": 12}
        assert DocumentValidator.validate(data, products_schema) == []

    def test_nested_fields_are_not_traversed(self):
        schema = schema_with(
            FieldDefinition(
                name="address",
                type=FieldType.OBJECT,
                nested_fields=[
                    FieldDefinition(name="city", type=FieldType.STRING, required=True)
                ],
            )
        )
        assert DocumentValidator.validate({"address": {}}, schema) == []

    def test_field_path_prefix(self):
        field = FieldDefinition(name="city", type=FieldType.STRING, required=True)
        assert DocumentValidator.validate_field({}, field, prefix="address") == [
            "Field 'address.city' is required"
        ]

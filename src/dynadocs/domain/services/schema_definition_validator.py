"""Validation of collection schema definitions.

Checks a schema before it is stored: the collection name, field names,
field name uniqueness and nesting. Field types and constraint values are
checked when a definition is parsed (see ``FieldDefinition.from_dict``).
"""

from dynadocs.domain.entities import CollectionSchema, FieldDefinition, FieldType


class SchemaDefinitionValidator:
    """Validator for schema create and update requests."""

    MAX_NAME_LENGTH = 64

    @classmethod
    def validate_collection_name(cls, name: str) -> list[str]:
        """Validate a collection name.

        Returns:
            List of error messages (empty if valid).
        """
        if not name or not name.strip():
            return ["Collection name is required"]
        if len(name) > cls.MAX_NAME_LENGTH:
            return [f"Collection name must be at most {cls.MAX_NAME_LENGTH} characters"]
        return []

    @classmethod
    def validate_fields(cls, fields: list[FieldDefinition], prefix: str = "") -> list[str]:
        """Validate a field list and, recursively, any nested field lists.

        Args:
            fields: The field definitions.
            prefix: Dotted path of the enclosing OBJECT field, if any.

        Returns:
            List of error messages (empty if valid).
        """
        errors: list[str] = []
        seen_names: set[str] = set()

        for index, field in enumerate(fields):
            location = f"{prefix}fields[{index}]"

            if not field.name or not field.name.strip():
                errors.append(f"{location}: Field name is required")
                continue

            if field.name in seen_names:
                errors.append(f"{location}: Duplicate field name '{field.name}'")
            seen_names.add(field.name)

            if field.nested_fields is not None:
                if field.type is not FieldType.OBJECT:
                    errors.append(
                        f"{location}: Nested fields are only allowed on OBJECT fields"
                    )
                else:
                    errors.extend(
                        cls.validate_fields(field.nested_fields, prefix=f"{field.name}.")
                    )

        return errors

    @classmethod
    def validate(cls, schema: CollectionSchema) -> list[str]:
        """Validate a complete schema definition."""
        errors = cls.validate_collection_name(schema.collection_name)
        errors.extend(cls.validate_fields(schema.fields))
        return errors

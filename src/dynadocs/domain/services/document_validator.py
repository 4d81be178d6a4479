"""Document validation against collection schemas.

Checks each declared field of a schema against a document payload and
produces human-readable violation messages. Supported field types:
STRING, INTEGER, DOUBLE, BOOLEAN are type-checked; DATE, OBJECT, ARRAY are
accepted as declared without a type check.
"""

from collections.abc import Callable
from typing import Any

from dynadocs.domain.entities import (
    CollectionSchema,
    Constraint,
    FieldDefinition,
    FieldType,
    Max,
    MaxLength,
    Min,
    MinLength,
)
from dynadocs.domain.services.values import (
    ValueKind,
    as_boolean,
    as_float,
    as_integer,
    format_number,
    is_numeric,
    kind_of,
    to_text,
)


class DocumentValidator:
    """Validator for document payloads.

    Only declared fields are checked; undeclared keys in a payload are
    accepted as-is. Nested field definitions are not traversed.
    """

    @staticmethod
    def field_path(name: str, prefix: str = "") -> str:
        """Dotted path of a field below ``prefix``."""
        return f"{prefix}.{name}" if prefix else name

    @classmethod
    def check_string(cls, value: Any, path: str) -> str | None:
        """Validate a STRING field value."""
        if kind_of(value) is not ValueKind.STRING:
            return f"Field '{path}' must be a string"
        return None

    @classmethod
    def check_integer(cls, value: Any, path: str) -> str | None:
        """Validate an INTEGER field value."""
        if as_integer(value) is None:
            return f"Field '{path}' must be an integer"
        return None

    @classmethod
    def check_double(cls, value: Any, path: str) -> str | None:
        """Validate a DOUBLE field value."""
        if as_float(value) is None:
            return f"Field '{path}' must be a number"
        return None

    @classmethod
    def check_boolean(cls, value: Any, path: str) -> str | None:
        """Validate a BOOLEAN field value."""
        if as_boolean(value) is None:
            return f"Field '{path}' must be a boolean"
        return None

    @classmethod
    def check_type(cls, value: Any, field_type: FieldType, path: str) -> str | None:
        """Validate a value against its declared type.

        DATE, OBJECT and ARRAY values pass unchecked.
        """
        checkers: dict[FieldType, Callable[[Any, str], str | None]] = {
            FieldType.STRING: cls.check_string,
            FieldType.INTEGER: cls.check_integer,
            FieldType.DOUBLE: cls.check_double,
            FieldType.BOOLEAN: cls.check_boolean,
        }
        checker = checkers.get(field_type)
        if checker is None:
            return None
        return checker(value, path)

    @classmethod
    def check_constraint(cls, value: Any, constraint: Constraint, path: str) -> str | None:
        """Apply one constraint to a value.

        Length constraints only apply to strings and bounds only to numbers;
        a constraint that does not apply to the value's kind is skipped.
        """
        if isinstance(constraint, MinLength):
            if kind_of(value) is ValueKind.STRING and len(value) < constraint.length:
                return f"Field '{path}' must be at least {constraint.length} characters"
            return None
        if isinstance(constraint, MaxLength):
            if kind_of(value) is ValueKind.STRING and len(value) > constraint.length:
                return f"Field '{path}' must be at most {constraint.length} characters"
            return None
        if isinstance(constraint, Min):
            if is_numeric(value) and value < constraint.bound:
                return f"Field '{path}' must be at least {format_number(constraint.bound)}"
            return None
        if isinstance(constraint, Max):
            if is_numeric(value) and value > constraint.bound:
                return f"Field '{path}' must be at most {format_number(constraint.bound)}"
            return None
        raise TypeError(f"Unsupported constraint: {constraint!r}")

    @classmethod
    def validate_field(
        cls, data: dict[str, Any], field: FieldDefinition, prefix: str = ""
    ) -> list[str]:
        """Validate one declared field of a payload.

        Args:
            data: The payload holding the field.
            field: The field definition.
            prefix: Dotted path of the enclosing object, if any.

        Returns:
            Violations for this field, in check order.
        """
        path = cls.field_path(field.name, prefix)
        value = data.get(field.name)

        if field.required and (value is None or not to_text(value).strip()):
            return [f"Field '{path}' is required"]

        if value is None:
            return []

        errors: list[str] = []

        type_error = cls.check_type(value, field.type, path)
        if type_error:
            errors.append(type_error)

        # Constraints run whatever the type check decided
        for constraint in field.constraints:
            error = cls.check_constraint(value, constraint, path)
            if error:
                errors.append(error)

        return errors

    @classmethod
    def validate(cls, data: dict[str, Any], schema: CollectionSchema) -> list[str]:
        """Validate a document payload against a collection schema.

        Args:
            data: The document payload.
            schema: The collection schema.

        Returns:
            Ordered list of violation messages (empty if valid).
        """
        errors: list[str] = []
        for field in schema.fields:
            errors.extend(cls.validate_field(data, field))
        return errors

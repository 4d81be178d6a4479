"""Field definitions for collection schemas.

A field definition describes one named field of a collection: its declared
type, whether it is required, its default value, the constraints applied to
its values, and (for OBJECT fields) a nested list of child definitions.
"""

import copy
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dynadocs.domain.exceptions import InvalidSchemaError


class FieldType(str, Enum):
    """Supported field types for collection schemas."""

    STRING = "STRING"
    INTEGER = "INTEGER"
    DOUBLE = "DOUBLE"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"

    @classmethod
    def parse(cls, value: "str | FieldType") -> "FieldType":
        """Parse a field type name case-insensitively.

        Raises:
            InvalidSchemaError: If the name is not a known field type.
        """
        if isinstance(value, FieldType):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        valid_types = ", ".join(t.value for t in cls)
        raise InvalidSchemaError(
            [f"Invalid field type '{value}'. Valid types: {valid_types}"]
        )


@dataclass(frozen=True)
class MinLength:
    """Minimum string length (inclusive)."""

    length: int
    key = "minLength"


@dataclass(frozen=True)
class MaxLength:
    """Maximum string length (inclusive)."""

    length: int
    key = "maxLength"


@dataclass(frozen=True)
class Min:
    """Minimum numeric value (inclusive)."""

    bound: float
    key = "min"


@dataclass(frozen=True)
class Max:
    """Maximum numeric value (inclusive)."""

    bound: float
    key = "max"


Constraint = MinLength | MaxLength | Min | Max

CONSTRAINT_KEYS = ("minLength", "maxLength", "min", "max")


def _as_bound(value: Any) -> float | None:
    """A finite float bound, or None when the value cannot be one."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        bound = float(value)
    except OverflowError:
        return None
    return bound if math.isfinite(bound) else None


def parse_constraints(validation: dict[str, Any] | None, field_name: str) -> tuple[Constraint, ...]:
    """Convert a constraint mapping such as ``{"minLength": 2}`` into constraints.

    Args:
        validation: The raw constraint mapping from a field definition.
        field_name: The owning field name, used in error messages.

    Returns:
        The constraints in mapping order.

    Raises:
        InvalidSchemaError: On unknown keys or values of the wrong kind.
    """
    if not validation:
        return ()

    errors: list[str] = []
    constraints: list[Constraint] = []

    for key, value in validation.items():
        if key in ("minLength", "maxLength"):
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(
                    f"Field '{field_name}': '{key}' must be a non-negative integer"
                )
                continue
            constraints.append(MinLength(value) if key == "minLength" else MaxLength(value))
        elif key in ("min", "max"):
            bound = _as_bound(value)
            if bound is None:
                errors.append(f"Field '{field_name}': '{key}' must be a finite number")
                continue
            constraints.append(Min(bound) if key == "min" else Max(bound))
        else:
            errors.append(
                f"Field '{field_name}': unknown validation rule '{key}'. "
                f"Valid rules: {', '.join(CONSTRAINT_KEYS)}"
            )

    if errors:
        raise InvalidSchemaError(errors)
    return tuple(constraints)


def constraints_to_mapping(constraints: tuple[Constraint, ...]) -> dict[str, Any]:
    """Render constraints back to their mapping form."""
    mapping: dict[str, Any] = {}
    for constraint in constraints:
        if isinstance(constraint, (MinLength, MaxLength)):
            mapping[constraint.key] = constraint.length
        elif isinstance(constraint, (Min, Max)):
            mapping[constraint.key] = constraint.bound
        else:
            raise TypeError(f"Unsupported constraint: {constraint!r}")
    return mapping


@dataclass
class FieldDefinition:
    """Definition of one field in a collection schema.

    Attributes:
        name: Field name, unique within its parent field list.
        type: Declared field type.
        required: Whether a missing or blank value is a violation.
        default_value: Value injected when the field is absent on create.
        constraints: Constraints applied to present values.
        nested_fields: Child definitions for OBJECT fields.
    """

    name: str
    type: FieldType
    required: bool = False
    default_value: Any = None
    constraints: tuple[Constraint, ...] = ()
    nested_fields: list["FieldDefinition"] | None = None

    def __post_init__(self) -> None:
        self.type = FieldType.parse(self.type)
        self.constraints = tuple(self.constraints)

    def default_copy(self) -> Any:
        """Return an independent copy of the default value."""
        return copy.deepcopy(self.default_value)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "FieldDefinition":
        """Build a definition from its wire form.

        Accepts both the camelCase keys (``defaultValue``, ``nestedFields``,
        ``validation``) and their snake_case equivalents.
        """
        name = raw.get("name") or ""
        nested = raw.get("nestedFields", raw.get("nested_fields"))
        return cls(
            name=name,
            type=FieldType.parse(raw.get("type", "")),
            required=bool(raw.get("required", False)),
            default_value=raw.get("defaultValue", raw.get("default_value")),
            constraints=parse_constraints(raw.get("validation"), name),
            nested_fields=[cls.from_dict(child) for child in nested] if nested is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the definition in its wire form."""
        return {
            "name": self.name,
            "type": self.type.value,
            "required": self.required,
            "defaultValue": self.default_value,
            "validation": constraints_to_mapping(self.constraints) or None,
            "nestedFields": (
                [child.to_dict() for child in self.nested_fields]
                if self.nested_fields is not None
                else None
            ),
        }

"""Domain entities for Dynadocs.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from dynadocs.domain.entities.collection_schema import CollectionSchema, utc_now
from dynadocs.domain.entities.document import DynamicDocument
from dynadocs.domain.entities.field_definition import (
    CONSTRAINT_KEYS,
    Constraint,
    FieldDefinition,
    FieldType,
    Max,
    MaxLength,
    Min,
    MinLength,
    constraints_to_mapping,
    parse_constraints,
)

__all__ = [
    "CONSTRAINT_KEYS",
    "CollectionSchema",
    "Constraint",
    "DynamicDocument",
    "FieldDefinition",
    "FieldType",
    "Max",
    "MaxLength",
    "Min",
    "MinLength",
    "constraints_to_mapping",
    "parse_constraints",
    "utc_now",
]

"""Domain services for Dynadocs.

Services contain business logic that doesn't naturally fit within a single entity.
They depend only on the store abstractions in ``dynadocs.domain.ports``.
"""

from dynadocs.domain.services.document_merger import DocumentMerger
from dynadocs.domain.services.document_service import DocumentService
from dynadocs.domain.services.document_validator import DocumentValidator
from dynadocs.domain.services.schema_definition_validator import SchemaDefinitionValidator
from dynadocs.domain.services.schema_registry import SchemaRegistry
from dynadocs.domain.services.store_calls import call_store
from dynadocs.domain.services.values import (
    ValueKind,
    as_boolean,
    as_float,
    as_integer,
    coerce_filter_value,
    is_numeric,
    kind_of,
    to_text,
    values_equal,
)

__all__ = [
    "DocumentMerger",
    "DocumentService",
    "DocumentValidator",
    "SchemaDefinitionValidator",
    "SchemaRegistry",
    "ValueKind",
    "as_boolean",
    "as_float",
    "as_integer",
    "call_store",
    "coerce_filter_value",
    "is_numeric",
    "kind_of",
    "to_text",
    "values_equal",
]

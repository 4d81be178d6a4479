"""Exceptions raised by the schema registry and document service."""


class DynadocsError(Exception):
    """Base class for all Dynadocs errors."""

    pass


class DuplicateSchemaError(DynadocsError):
    """Raised when a schema already exists for a collection name."""

    def __init__(self, collection_name: str):
        self.collection_name = collection_name
        super().__init__(f"Collection schema already exists: {collection_name}")


class SchemaNotFoundError(DynadocsError):
    """Raised when an operation references an unknown collection."""

    def __init__(self, collection_name: str):
        self.collection_name = collection_name
        super().__init__(f"Collection schema not found: {collection_name}")


class DocumentNotFoundError(DynadocsError):
    """Raised when an update references an unknown document id."""

    def __init__(self, collection_name: str, document_id: str):
        self.collection_name = collection_name
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id}")


class ValidationFailedError(DynadocsError):
    """Raised when a payload violates its collection schema.

    Attributes:
        violations: Ordered list of human-readable violation messages.
    """

    def __init__(self, violations: list[str]):
        self.violations = list(violations)
        super().__init__(f"Validation errors: {', '.join(self.violations)}")


class InvalidSchemaError(DynadocsError):
    """Raised when a schema definition itself is malformed."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid schema: {'; '.join(self.errors)}")


class StoreUnavailableError(DynadocsError):
    """Raised when the backing store cannot serve a request.

    Store failures are propagated unchanged to the caller; nothing in the
    service retries them.
    """

    pass

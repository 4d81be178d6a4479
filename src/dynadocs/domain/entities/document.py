"""Dynamic document entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class DynamicDocument:
    """A stored record in a dynamic collection.

    ``data`` may hold fields that the collection schema does not declare;
    only declared fields are ever validated.

    Attributes:
        collection_name: Name of the owning collection.
        data: Field name to value mapping.
        id: Store-assigned identifier (None until persisted).
        created_at: Timestamp when the document was created.
        updated_at: Timestamp when the document was last updated.
    """

    collection_name: str
    data: dict[str, Any] = field(default_factory=dict)
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

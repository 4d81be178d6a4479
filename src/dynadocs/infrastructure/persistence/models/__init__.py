"""SQLAlchemy models for the Dynadocs tables.

All models inherit from the Base class defined in database.py and are
created on application startup.
"""

from dynadocs.infrastructure.persistence.models.collection_schema import CollectionSchemaModel
from dynadocs.infrastructure.persistence.models.document import DocumentModel

__all__ = [
    "CollectionSchemaModel",
    "DocumentModel",
]

"""Demo data: a ``products`` collection with two sample documents."""

from dynadocs.core.logging import get_logger
from dynadocs.domain.entities import (
    CollectionSchema,
    DynamicDocument,
    FieldDefinition,
    FieldType,
    MaxLength,
    Min,
    MinLength,
)
from dynadocs.domain.exceptions import DuplicateSchemaError
from dynadocs.domain.services import DocumentService

logger = get_logger(__name__)

DEMO_COLLECTION = "products"

DEMO_DOCUMENTS = [
    {"name": "Sample Product 1", "price": 99.99, "category": "electronics"},
    {"name": "Sample Product 2", "price": 149.50, "category": "books"},
]


def products_schema() -> CollectionSchema:
    """Build the demo ``products`` schema."""
    return CollectionSchema(
        collection_name=DEMO_COLLECTION,
        fields=[
            FieldDefinition(
                name="name",
                type=FieldType.STRING,
                required=True,
                constraints=(MinLength(2), MaxLength(100)),
            ),
            FieldDefinition(
                name="price",
                type=FieldType.DOUBLE,
                required=True,
                constraints=(Min(0.0),),
            ),
            FieldDefinition(name="category", type=FieldType.STRING, default_value="general"),
        ],
        created_by="demo",
    )


async def create_demo_data(service: DocumentService) -> list[DynamicDocument] | None:
    """Create the demo collection and its sample documents.

    Returns:
        The created documents, or None if the collection already existed.
    """
    try:
        await service.create_schema(products_schema())
    except DuplicateSchemaError:
        logger.info("Demo data skipped: collection exists", collection_name=DEMO_COLLECTION)
        return None

    documents = [
        await service.create_document(DEMO_COLLECTION, dict(data)) for data in DEMO_DOCUMENTS
    ]
    logger.info("Demo data created", collection_name=DEMO_COLLECTION, count=len(documents))
    return documents

"""SQLAlchemy model for the collection_schemas table."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dynadocs.infrastructure.persistence.database import Base


class CollectionSchemaModel(Base):
    """SQLAlchemy model for the collection_schemas table.

    Attributes:
        id: Primary key (UUID string).
        collection_name: Collection name, unique across the table.
        fields: JSON array of field definitions.
        created_at: Timestamp when the schema was created.
        updated_at: Timestamp when the field list was last replaced.
        created_by: Identity of the creator, if known.
    """

    __tablename__ = "collection_schemas"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Schema ID (UUID)",
    )
    collection_name: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
    )
    fields: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="JSON array of field definitions",
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<CollectionSchema(id={self.id}, collection_name={self.collection_name})>"

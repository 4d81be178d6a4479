"""SQLAlchemy model for the documents table.

Documents of every collection share this table; the data payload is stored
as JSON text and is never mapped to columns.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dynadocs.infrastructure.persistence.database import Base


class DocumentModel(Base):
    """SQLAlchemy model for the documents table.

    Attributes:
        id: Primary key (UUID string).
        collection_name: Owning collection name.
        data: JSON object holding the document fields.
        created_at: Timestamp when the document was created.
        updated_at: Timestamp when the document was last updated.
    """

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Document ID (UUID)",
    )
    collection_name: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )
    data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="JSON object of document fields",
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, collection_name={self.collection_name})>"

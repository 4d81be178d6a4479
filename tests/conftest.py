"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from dynadocs.domain.entities import (
    CollectionSchema,
    FieldDefinition,
    FieldType,
    MaxLength,
    Min,
    MinLength,
)
from dynadocs.domain.services import DocumentService, SchemaRegistry
from dynadocs.infrastructure.persistence.database import Base
from dynadocs.infrastructure.persistence.memory import (
    InMemoryDocumentStore,
    InMemorySchemaStore,
)
from dynadocs.infrastructure.persistence import models  # noqa: F401


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from dynadocs.infrastructure.api.app import app
    from dynadocs.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest.fixture
def memory_service() -> DocumentService:
    """Document service over fresh in-memory stores."""
    registry = SchemaRegistry(InMemorySchemaStore())
    return DocumentService(registry, InMemoryDocumentStore())


@pytest.fixture
def products_schema() -> CollectionSchema:
    """The ``products`` schema used throughout the tests."""
    return CollectionSchema(
        collection_name="products",
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
    )


@pytest.fixture
def products_payload() -> dict:
    """Wire form of the ``products`` schema."""
    return {
        "collectionName": "products",
        "fields": [
            {
                "name": "name",
                "type": "STRING",
                "required": True,
                "validation": {"minLength": 2, "maxLength": 100},
            },
            {
                "name": "price",
                "type": "DOUBLE",
                "required": True,
                "validation": {"min": 0},
            },
            {"name": "category", "type": "STRING", "defaultValue": "general"},
        ],
    }

"""Unit tests for SchemaRepository."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from dynadocs.domain.entities import (
    CollectionSchema,
    FieldDefinition,
    FieldType,
    MaxLength,
    Min,
    MinLength,
    utc_now,
)
from dynadocs.domain.exceptions import (
    DuplicateSchemaError,
    SchemaNotFoundError,
    StoreUnavailableError,
)
from dynadocs.infrastructure.persistence.repositories import SchemaRepository


@pytest.mark.asyncio
async def test_insert_and_find(db_session, products_schema):
    repo = SchemaRepository(db_session)

    created = await repo.insert_unique(products_schema)
    found = await repo.find_by_name("products")

    assert found.id == created.id
    assert found.created_at.tzinfo is not None
    assert [f.name for f in found.fields] == ["name", "price", "category"]
    assert found.field_named("name").constraints == (MinLength(2), MaxLength(100))
    assert found.field_named("price").constraints == (Min(0.0),)
    assert found.field_named("category").default_value == "general"


@pytest.mark.asyncio
async def test_nested_fields_round_trip(db_session):
    repo = SchemaRepository(db_session)
    schema = CollectionSchema(
        collection_name="people",
        fields=[
            FieldDefinition(
                name="address",
                type=FieldType.OBJECT,
                nested_fields=[FieldDefinition(name="city", type=FieldType.STRING)],
            )
        ],
    )

    await repo.insert_unique(schema)
    found = await repo.find_by_name("people")

    assert found.fields[0].nested_fields[0].name == "city"


@pytest.mark.asyncio
async def test_unique_collection_name(db_session, products_schema):
    repo = SchemaRepository(db_session)
    await repo.insert_unique(products_schema)
    await db_session.commit()

    with pytest.raises(DuplicateSchemaError):
        await repo.insert_unique(products_schema)

    assert len(await repo.list_all()) == 1


@pytest.mark.asyncio
async def test_find_missing(db_session):
    assert await SchemaRepository(db_session).find_by_name("nothing") is None


@pytest.mark.asyncio
async def test_save_replaces_fields(db_session, products_schema):
    repo = SchemaRepository(db_session)
    created = await repo.insert_unique(products_schema)

    created.fields = [FieldDefinition(name="sku", type=FieldType.STRING)]
    created.updated_at = utc_now()
    saved = await repo.save(created)

    assert [f.name for f in saved.fields] == ["sku"]
    assert [f.name for f in (await repo.find_by_name("products")).fields] == ["sku"]


@pytest.mark.asyncio
async def test_save_missing(db_session, products_schema):
    with pytest.raises(SchemaNotFoundError):
        await SchemaRepository(db_session).save(products_schema)


@pytest.mark.asyncio
async def test_delete_and_list(db_session, products_schema):
    repo = SchemaRepository(db_session)
    await repo.insert_unique(products_schema)
    await repo.insert_unique(CollectionSchema(collection_name="orders"))

    assert [s.collection_name for s in await repo.list_all()] == ["orders", "products"]

    await repo.delete_by_name("products")
    assert [s.collection_name for s in await repo.list_all()] == ["orders"]


@pytest.mark.asyncio
async def test_connection_failure_is_store_unavailable():
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))

    with pytest.raises(StoreUnavailableError):
        await SchemaRepository(session).find_by_name("products")

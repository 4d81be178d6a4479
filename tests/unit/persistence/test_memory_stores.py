"""Unit tests for the in-memory stores."""

import pytest

from dynadocs.domain.entities import CollectionSchema, DynamicDocument, utc_now
from dynadocs.domain.exceptions import DuplicateSchemaError, SchemaNotFoundError
from dynadocs.infrastructure.persistence.memory import (
    InMemoryDocumentStore,
    InMemorySchemaStore,
)


class TestInMemorySchemaStore:

    @pytest.mark.asyncio
    async def test_insert_unique(self, products_schema):
        store = InMemorySchemaStore()
        created = await store.insert_unique(products_schema)

        assert created.id is not None
        assert products_schema.id is None
        with pytest.raises(DuplicateSchemaError):
            await store.insert_unique(products_schema)

    @pytest.mark.asyncio
    async def test_save_missing(self):
        with pytest.raises(SchemaNotFoundError):
            await InMemorySchemaStore().save(CollectionSchema(collection_name="ghosts"))

    @pytest.mark.asyncio
    async def test_delete_missing_is_silent(self):
        store = InMemorySchemaStore()
        await store.delete_by_name("ghosts")
        assert await store.list_all() == []


class TestInMemoryDocumentStore:

    @pytest.mark.asyncio
    async def test_insertion_order(self):
        store = InMemoryDocumentStore()
        first = await store.insert("c", DynamicDocument(collection_name="c", data={"n": 1}))
        second = await store.insert("c", DynamicDocument(collection_name="c", data={"n": 2}))

        assert [d.id for d in await store.find_all("c")] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_stored_data_is_isolated(self):
        store = InMemoryDocumentStore()
        data = {"tags": ["a"]}
        created = await store.insert("c", DynamicDocument(collection_name="c", data=data))
        data["tags"].append("b")
        created.data["tags"].append("c")

        assert (await store.find_by_id("c", created.id)).data == {"tags": ["a"]}

    @pytest.mark.asyncio
    async def test_update_and_delete_counts(self):
        store = InMemoryDocumentStore()
        created = await store.insert("c", DynamicDocument(collection_name="c", data={}))

        assert await store.update_fields("c", created.id, data={"x": 1}, updated_at=utc_now()) == 1
        assert await store.update_fields("c", "nope", data={}, updated_at=utc_now()) == 0
        assert await store.delete_by_id("c", created.id) == 1
        assert await store.delete_by_id("c", created.id) == 0

    @pytest.mark.asyncio
    async def test_find_where_and_drop(self):
        store = InMemoryDocumentStore()
        await store.insert("c", DynamicDocument(collection_name="c", data={"flag": True}))
        await store.insert("c", DynamicDocument(collection_name="c", data={"flag": "true"}))

        assert len(await store.find_where("c", {"flag": True})) == 1

        await store.drop_collection("c")
        assert await store.find_all("c") == []

"""Tests for the blob stores."""

import json
from unittest.mock import AsyncMock

import pytest

from app.core.exceptions import PersistenceError
from app.services.blob_store import MemoryBlobStore, RedisBlobStore


@pytest.mark.asyncio
async def test_round_trip(blob_store, make_document):
    collection = [make_document().model_dump(mode="json", by_alias=True)]

    assert await blob_store.save("documents", collection) is True
    assert await blob_store.load("documents", []) == collection


@pytest.mark.asyncio
async def test_missing_key_returns_default(blob_store):
    assert await blob_store.load("missing", {"theme": "light"}) == {"theme": "light"}


@pytest.mark.asyncio
async def test_corrupt_blob_returns_default():
    store = MemoryBlobStore()
    store._blobs["documents"] = "{not json"

    assert await store.load("documents", ["fallback"]) == ["fallback"]


@pytest.mark.asyncio
async def test_unserializable_value_is_not_saved(blob_store):
    assert await blob_store.save("bad", {"value": object()}) is False
    assert await blob_store.load("bad") is None


@pytest.mark.asyncio
async def test_redis_store_reads_and_writes_json():
    client = AsyncMock()
    client.get.return_value = json.dumps({"theme": "dark"})
    store = RedisBlobStore(client=client)

    assert await store.load("userPreferences", {}) == {"theme": "dark"}
    assert await store.save("userPreferences", {"theme": "light"}) is True
    client.set.assert_awaited_once_with("userPreferences", '{"theme": "light"}')


@pytest.mark.asyncio
async def test_redis_failures_are_swallowed():
    client = AsyncMock()
    client.get.side_effect = ConnectionError("redis down")
    client.set.side_effect = ConnectionError("redis down")
    store = RedisBlobStore(client=client)

    assert await store.load("documents", ["default"]) == ["default"]
    assert await store.save("documents", []) is False


@pytest.mark.asyncio
async def test_unconnected_redis_store_degrades():
    store = RedisBlobStore()

    assert await store.load("documents", "default") == "default"
    assert await store.save("documents", []) is False


@pytest.mark.asyncio
async def test_redis_connect_failure_raises_persistence_error(monkeypatch):
    client = AsyncMock()
    client.ping.side_effect = ConnectionError("refused")
    store = RedisBlobStore(client=client)

    async def no_sleep(_):
        return None

    monkeypatch.setattr("app.services.retry.asyncio.sleep", no_sleep)

    with pytest.raises(PersistenceError):
        await store.connect()
    assert store.client is None


@pytest.mark.asyncio
async def test_redis_connect_retries_ping(monkeypatch):
    client = AsyncMock()
    client.ping.side_effect = [ConnectionError("loading"), True]
    store = RedisBlobStore(client=client)

    async def no_sleep(_):
        return None

    monkeypatch.setattr("app.services.retry.asyncio.sleep", no_sleep)

    await store.connect()

    assert store.client is client
    assert client.ping.await_count == 2

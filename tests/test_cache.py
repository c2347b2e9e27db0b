"""RedisCache with the Redis client replaced by an AsyncMock."""
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from userhub.cache import RedisCache
from userhub.errors import InternalError


@pytest.fixture
def client():
    return AsyncMock()


@pytest.fixture
def cache(client) -> RedisCache:
    return RedisCache("redis://localhost:6379/0", client=client)


@pytest.mark.asyncio
async def test_set_serialises_value_with_ttl(cache, client):
    await cache.set("user:1", {"name": "A"}, ttl=30)
    client.set.assert_awaited_once_with("user:1", '{"name": "A"}', ex=30)


@pytest.mark.asyncio
@pytest.mark.parametrize("ttl", [None, 0, -5])
async def test_set_without_positive_ttl_never_expires(cache, client, ttl):
    await cache.set("k", "v", ttl=ttl)
    client.set.assert_awaited_once_with("k", '"v"', ex=None)


@pytest.mark.asyncio
async def test_get_returns_stored_text(cache, client):
    client.get.return_value = '{"name": "A"}'
    assert await cache.get("user:1") == '{"name": "A"}'


@pytest.mark.asyncio
async def test_get_miss_returns_none(cache, client):
    client.get.return_value = None
    assert await cache.get("missing") is None


@pytest.mark.asyncio
async def test_delete(cache, client):
    await cache.delete("k")
    client.delete.assert_awaited_once_with("k")


@pytest.mark.asyncio
async def test_exists(cache, client):
    client.exists.return_value = 1
    assert await cache.exists("k") is True
    client.exists.return_value = 0
    assert await cache.exists("k") is False


@pytest.mark.asyncio
async def test_redis_failure_becomes_internal_error(cache, client):
    client.get.side_effect = redis.ConnectionError("down")
    with pytest.raises(InternalError):
        await cache.get("k")


@pytest.mark.asyncio
async def test_operations_before_connect_fail():
    cache = RedisCache("redis://localhost:6379/0")
    with pytest.raises(InternalError):
        await cache.exists("k")


@pytest.mark.asyncio
async def test_connect_tolerates_failed_ping(cache, client):
    client.ping.side_effect = redis.ConnectionError("refused")
    await cache.connect()
    client.ping.assert_awaited_once()


@pytest.mark.asyncio
async def test_disconnect_closes_pool(cache, client):
    await cache.disconnect()
    client.aclose.assert_awaited_once()
    with pytest.raises(InternalError):
        await cache.get("k")

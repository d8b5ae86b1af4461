"""
Tests for the Redis cache backend adapter.

The Redis client is replaced with an AsyncMock, so no server is needed.
"""

import asyncio
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from post_cache.errors import PostNotFoundError
from post_cache.repositories import CachedPostRepository, RedisCacheBackend


async def _hang(*args, **kwargs):
    await asyncio.sleep(5)


@pytest.fixture
def redis_client():
    client = AsyncMock()
    client.get.return_value = None
    client.set.return_value = True
    client.delete.return_value = 1
    client.ping.return_value = True
    return client


@pytest.fixture
def backend(redis_client):
    return RedisCacheBackend(redis_client=redis_client, timeout=0.05)


@pytest.fixture
def broken_client():
    client = AsyncMock()
    error = RedisConnectionError("Connection refused")
    client.get.side_effect = error
    client.set.side_effect = error
    client.delete.side_effect = error
    client.ping.side_effect = error
    return client


class TestRedisCacheBackend:
    @pytest.mark.asyncio
    async def test_get_returns_bytes(self, backend, redis_client):
        redis_client.get.return_value = b'{"a": 1}'

        assert await backend.get("posts") == b'{"a": 1}'
        redis_client.get.assert_awaited_once_with("posts")

    @pytest.mark.asyncio
    async def test_get_encodes_str_values(self, backend, redis_client):
        redis_client.get.return_value = "text"

        assert await backend.get("posts") == b"text"

    @pytest.mark.asyncio
    async def test_set_uses_expiry(self, backend, redis_client):
        assert await backend.set("posts", b"[]", 300) is True
        redis_client.set.assert_awaited_once_with("posts", b"[]", ex=300)

    @pytest.mark.asyncio
    async def test_delete_sends_all_keys_in_one_call(self, backend, redis_client):
        assert await backend.delete("posts", "post:1") is True
        redis_client.delete.assert_awaited_once_with("posts", "post:1")

    @pytest.mark.asyncio
    async def test_delete_without_keys_is_noop(self, backend, redis_client):
        assert await backend.delete() is True
        redis_client.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_connection_errors_are_swallowed(self, broken_client):
        backend = RedisCacheBackend(redis_client=broken_client, timeout=0.05)

        assert await backend.get("posts") is None
        assert await backend.set("posts", b"[]", 300) is False
        assert await backend.delete("posts") is False
        assert await backend.health_check() is False

    @pytest.mark.asyncio
    async def test_redis_timeout_is_a_miss(self, backend, redis_client):
        redis_client.get.side_effect = RedisTimeoutError("Timeout reading from socket")

        assert await backend.get("posts") is None

    @pytest.mark.asyncio
    async def test_slow_backend_is_bounded_by_timeout(self, backend, redis_client):
        redis_client.get.side_effect = _hang
        redis_client.set.side_effect = _hang
        redis_client.delete.side_effect = _hang

        assert await asyncio.wait_for(backend.get("posts"), 1) is None
        assert await asyncio.wait_for(backend.set("posts", b"[]", 300), 1) is False
        assert await asyncio.wait_for(backend.delete("posts"), 1) is False

    @pytest.mark.asyncio
    async def test_health_check(self, backend):
        assert await backend.health_check() is True

    @pytest.mark.asyncio
    async def test_close_releases_client(self, backend, redis_client):
        await backend.close()
        redis_client.aclose.assert_awaited_once()


class TestDecoratorOverBrokenRedis:
    """Every operation succeeds when Redis fails every call."""

    @pytest.mark.asyncio
    async def test_crud_succeeds(self, store, broken_client):
        repo = CachedPostRepository(
            inner=store,
            cache=RedisCacheBackend(redis_client=broken_client, timeout=0.05),
            ttl=300,
        )

        post = await repo.create("title", "body")
        assert await repo.list_posts() == [post]
        assert await repo.get(post.id) == post

        updated = await repo.update(post.id, "new", "body")
        assert updated.title == "new"
        assert (await repo.get(post.id)).title == "new"

        await repo.delete(post.id)
        with pytest.raises(PostNotFoundError):
            await repo.get(post.id)
        with pytest.raises(PostNotFoundError):
            await repo.delete(uuid4())

    @pytest.mark.asyncio
    async def test_crud_succeeds_with_hanging_redis(self, store, redis_client):
        redis_client.get.side_effect = _hang
        redis_client.set.side_effect = _hang
        redis_client.delete.side_effect = _hang
        repo = CachedPostRepository(
            inner=store,
            cache=RedisCacheBackend(redis_client=redis_client, timeout=0.05),
            ttl=300,
        )

        post = await asyncio.wait_for(repo.create("title", "body"), 1)
        assert await asyncio.wait_for(repo.get(post.id), 1) == post
        assert await asyncio.wait_for(repo.list_posts(), 1) == [post]


@pytest.mark.parametrize("timeout", [0, -0.5])
def test_non_positive_timeout_rejected(redis_client, timeout):
    with pytest.raises(ValueError, match="timeout"):
        RedisCacheBackend(redis_client=redis_client, timeout=timeout)

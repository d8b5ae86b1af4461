"""Shared fixtures and in-memory fakes for the post cache tests."""

from collections import Counter
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest

from post_cache.entities import PostEntity
from post_cache.errors import PostNotFoundError, StoreFailureError
from post_cache.repositories import CachedPostRepository


class FakePostStore:
    """In-memory PostStore that counts calls and can be told to fail."""

    def __init__(self) -> None:
        self.posts: dict[UUID, PostEntity] = {}
        self.calls: Counter[str] = Counter()
        self.failure: Exception | None = None
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _check(self, operation: str) -> None:
        self.calls[operation] += 1
        if self.failure is not None:
            raise self.failure

    async def list_posts(self) -> list[PostEntity]:
        self._check("list_posts")
        return sorted(self.posts.values(), key=lambda p: p.created_at)

    async def get(self, post_id: UUID) -> PostEntity:
        self._check("get")
        if post_id not in self.posts:
            raise PostNotFoundError(post_id)
        return self.posts[post_id]

    async def create(self, title: str, content: str) -> PostEntity:
        self._check("create")
        self._clock += timedelta(seconds=1)
        post = PostEntity(id=uuid4(), title=title, content=content, created_at=self._clock)
        self.posts[post.id] = post
        return post

    async def update(self, post_id: UUID, title: str, content: str) -> PostEntity:
        self._check("update")
        if post_id not in self.posts:
            raise PostNotFoundError(post_id)
        old = self.posts[post_id]
        post = PostEntity(id=post_id, title=title, content=content, created_at=old.created_at)
        self.posts[post_id] = post
        return post

    async def delete(self, post_id: UUID) -> None:
        self._check("delete")
        if post_id not in self.posts:
            raise PostNotFoundError(post_id)
        del self.posts[post_id]

    async def health_check(self) -> bool:
        return self.failure is None


class FakeCacheBackend:
    """In-memory CacheBackend recording every call.

    With ``available`` set to False it behaves like the Redis backend
    during an outage: reads miss and writes report False.
    """

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.ttls: dict[str, int] = {}
        self.gets: list[str] = []
        self.sets: list[str] = []
        self.deletes: list[tuple[str, ...]] = []
        self.available = True

    async def get(self, key: str) -> bytes | None:
        self.gets.append(key)
        if not self.available:
            return None
        return self.data.get(key)

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        self.sets.append(key)
        if not self.available:
            return False
        self.data[key] = value
        self.ttls[key] = ttl
        return True

    async def delete(self, *keys: str) -> bool:
        self.deletes.append(keys)
        if not self.available:
            return False
        for key in keys:
            self.data.pop(key, None)
            self.ttls.pop(key, None)
        return True

    async def health_check(self) -> bool:
        return self.available


@pytest.fixture
def store() -> FakePostStore:
    return FakePostStore()


@pytest.fixture
def cache() -> FakeCacheBackend:
    return FakeCacheBackend()


@pytest.fixture
def cached_repo(store: FakePostStore, cache: FakeCacheBackend) -> CachedPostRepository:
    return CachedPostRepository(inner=store, cache=cache, ttl=300)


@pytest.fixture
def store_failure() -> StoreFailureError:
    return StoreFailureError("connection reset")

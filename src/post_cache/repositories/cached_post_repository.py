"""Caching decorator for any PostStore.

Cache-aside with invalidate-on-write:

- Reads try the cache first, fall back to the inner store on a miss, and
  repopulate the cache with the store's answer.
- Writes go to the inner store first. Only a successful write invalidates
  the affected keys; entries are deleted, never rewritten.

The cache is never part of the correctness contract. The backend reports
its own failures as misses or ``False`` results, so a cache outage costs
latency only. A stale entry can survive a failed invalidation for at most
the TTL.

Invalidation deletes the collection key and then the item key in a single
command. A reader racing with a writer can still repopulate a key from a
pre-write store read; that window is bounded by the TTL as well.
"""

from uuid import UUID

import structlog

from post_cache.config import settings
from post_cache.entities import PostEntity
from post_cache.protocols import CacheBackend, PostStore

from .post_codec import decode_post, decode_posts, encode_post, encode_posts

logger = structlog.get_logger(__name__)

POSTS_KEY = "posts"
POST_KEY_PREFIX = "post:"


def post_key(post_id: UUID) -> str:
    """Cache key for a single post."""
    return f"{POST_KEY_PREFIX}{post_id}"


class CachedPostRepository:
    """PostStore decorator that adds a collection cache and a per-post cache.

    This class satisfies the PostStore protocol through structural typing,
    so it can replace the store it wraps without any change upstream. It
    holds no mutable state and is safe to share between concurrent requests.

    Example:
        ```python
        store = CachedPostRepository.wrap(
            inner=SqlPostRepository.from_engine(engine),
            cache=RedisCacheBackend.create(),
        )
        post = await store.get(post_id)  # served from Redis on the second call
        ```
    """

    def __init__(
        self,
        inner: PostStore,
        cache: CacheBackend,
        ttl: int | None = None,
    ) -> None:
        """Initialize the caching decorator.

        Args:
            inner: The store of record (required).
            cache: Cache backend (required).
            ttl: Time-to-live for cache entries in seconds. Defaults to settings.

        Raises:
            ValueError: If ttl is not positive
        """
        if ttl is None:
            ttl = settings.cache_ttl
        if ttl <= 0:
            raise ValueError(f"Cache TTL must be positive, got {ttl}")

        self._inner = inner
        self._cache = cache
        self._ttl = ttl

    @classmethod
    def wrap(
        cls,
        inner: PostStore,
        cache: CacheBackend,
        ttl: int | None = None,
    ) -> "CachedPostRepository":
        """Factory method to put a cache in front of an existing store.

        Not named ``create``: that name belongs to the PostStore operation.
        """
        return cls(inner=inner, cache=cache, ttl=ttl)

    @property
    def ttl(self) -> int:
        """Time-to-live applied to every cache entry, in seconds."""
        return self._ttl

    async def list_posts(self) -> list[PostEntity]:
        cached = await self._cache.get(POSTS_KEY)
        if cached is not None:
            posts = decode_posts(cached)
            if posts is not None:
                logger.debug("Cache hit", key=POSTS_KEY, count=len(posts))
                return posts
            logger.warning("Discarding undecodable cache entry", key=POSTS_KEY)

        logger.debug("Cache miss", key=POSTS_KEY)
        posts = await self._inner.list_posts()
        await self._cache.set(POSTS_KEY, encode_posts(posts), self._ttl)
        return posts

    async def get(self, post_id: UUID) -> PostEntity:
        key = post_key(post_id)

        cached = await self._cache.get(key)
        if cached is not None:
            post = decode_post(cached)
            if post is not None:
                logger.debug("Cache hit", key=key)
                return post
            logger.warning("Discarding undecodable cache entry", key=key)

        logger.debug("Cache miss", key=key)
        post = await self._inner.get(post_id)
        await self._cache.set(key, encode_post(post), self._ttl)
        return post

    async def create(self, title: str, content: str) -> PostEntity:
        post = await self._inner.create(title, content)
        # A new id has no item entry yet; only the collection is stale.
        await self._invalidate(POSTS_KEY)
        return post

    async def update(self, post_id: UUID, title: str, content: str) -> PostEntity:
        post = await self._inner.update(post_id, title, content)
        await self._invalidate(POSTS_KEY, post_key(post_id))
        return post

    async def delete(self, post_id: UUID) -> None:
        await self._inner.delete(post_id)
        await self._invalidate(POSTS_KEY, post_key(post_id))

    async def health_check(self) -> bool:
        """Report the health of the store of record."""
        return await self._inner.health_check()

    async def _invalidate(self, *keys: str) -> None:
        if not await self._cache.delete(*keys):
            logger.warning(
                "Cache invalidation failed; entries may be stale until TTL expiry",
                keys=list(keys),
                ttl=self._ttl,
            )

    @property
    def inner(self) -> PostStore:
        """Get the wrapped store (for testing)."""
        return self._inner

    @property
    def cache(self) -> CacheBackend:
        """Get the cache backend (for testing)."""
        return self._cache

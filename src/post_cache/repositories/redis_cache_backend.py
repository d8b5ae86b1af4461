"""Redis implementation of CacheBackend.

Uses a shared ``redis.asyncio`` client. The client owns a connection pool,
so one instance serves any number of concurrent callers without a lock.
Every command is bounded by a short timeout, and any transport failure is
logged and reported as a miss (reads) or a ``False`` result (writes).
"""

import asyncio

import redis.asyncio as redis
import structlog
from redis.exceptions import RedisError

from post_cache.config import get_redis_client, settings

logger = structlog.get_logger(__name__)

_CACHE_ERRORS = (RedisError, OSError, asyncio.TimeoutError)


class RedisCacheBackend:
    """Redis key/value cache with best-effort semantics.

    This class satisfies the CacheBackend protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_client: Async Redis client instance. If None, creates default.
            timeout: Upper bound in seconds for each cache command. Defaults to settings.

        Raises:
            ValueError: If timeout is not positive
        """
        if timeout is None:
            timeout = settings.cache_timeout
        if timeout <= 0:
            raise ValueError(f"Cache timeout must be positive, got {timeout}")

        self._client = redis_client or get_redis_client()
        self._timeout = timeout

    @classmethod
    def create(cls, timeout: float | None = None) -> "RedisCacheBackend":
        """Factory method to create RedisCacheBackend with defaults.

        Args:
            timeout: Per-command timeout in seconds. If None, uses settings.

        Returns:
            Configured RedisCacheBackend
        """
        return cls(timeout=timeout)

    async def get(self, key: str) -> bytes | None:
        """Fetch a value, treating any failure as a miss."""
        try:
            value = await asyncio.wait_for(self._client.get(key), self._timeout)
        except _CACHE_ERRORS as e:
            logger.warning("Cache get failed", key=key, error=repr(e))
            return None

        if isinstance(value, str):
            return value.encode()
        return value

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        """Store a value with an expiry; failures are logged and swallowed."""
        try:
            await asyncio.wait_for(self._client.set(key, value, ex=ttl), self._timeout)
        except _CACHE_ERRORS as e:
            logger.warning("Cache set failed", key=key, ttl=ttl, error=repr(e))
            return False
        return True

    async def delete(self, *keys: str) -> bool:
        """Remove keys; failures are logged and swallowed."""
        if not keys:
            return True

        try:
            await asyncio.wait_for(self._client.delete(*keys), self._timeout)
        except _CACHE_ERRORS as e:
            logger.warning("Cache delete failed", keys=list(keys), error=repr(e))
            return False
        return True

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            result = await asyncio.wait_for(self._client.ping(), self._timeout)
            return bool(result)
        except _CACHE_ERRORS:
            return False

    async def close(self) -> None:
        """Release the client's connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client

"""Cache backend protocol.

A narrow key/value interface over an external cache process. All methods
are best-effort: a transport failure is reported as an absent value (for
``get``) or a ``False`` result (for ``set``/``delete``), never raised.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """Protocol for key/value cache backends.

    Example:
        ```python
        from post_cache.protocols import CacheBackend

        backend: CacheBackend = RedisCacheBackend.create()
        ```
    """

    async def get(self, key: str) -> bytes | None:
        """Fetch a value.

        Args:
            key: The cache key

        Returns:
            The stored bytes, or None on miss, expiry or failure
        """
        ...

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        """Store a value with an expiry.

        Args:
            key: The cache key
            value: Encoded payload
            ttl: Time-to-live in seconds

        Returns:
            True if the backend acknowledged the write
        """
        ...

    async def delete(self, *keys: str) -> bool:
        """Remove one or more keys.

        Returns:
            True if the backend acknowledged the delete (even if no key existed)
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable."""
        ...

"""Repository layer for data access.

This layer abstracts external dependencies (PostgreSQL, Redis) behind
protocol-based interfaces. This enables:
- Easy swapping of implementations
- Wrapping the store of record in a caching decorator
- Unit testing with fake implementations

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from post_cache.protocols import CacheBackend, PostStore

from .cached_post_repository import POSTS_KEY, CachedPostRepository, post_key
from .redis_cache_backend import RedisCacheBackend
from .sql_post_repository import SqlPostRepository

__all__ = [
    "CacheBackend",
    "PostStore",
    "CachedPostRepository",
    "RedisCacheBackend",
    "SqlPostRepository",
    "POSTS_KEY",
    "post_key",
]

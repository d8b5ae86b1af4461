"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (PostgreSQL → anything else, Redis → memcached)
- Wrapping one implementation in another (the caching decorator)
- Unit testing with fake implementations

Usage:
    ```python
    from post_cache.protocols import CacheBackend, PostStore

    store: PostStore = SqlPostRepository.from_engine()
    store: PostStore = CachedPostRepository.wrap(inner=store, cache=backend)
    ```
"""

from .cache_backend import CacheBackend
from .post_store import PostStore

__all__ = [
    "CacheBackend",
    "PostStore",
]

"""Post Cache - post CRUD backend with a cache-aside Redis layer.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (PostStore, CacheBackend)
    - repositories: Data access implementations (SQL store, Redis cache, caching decorator)
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from post_cache.repositories import CachedPostRepository, RedisCacheBackend, SqlPostRepository
    from post_cache.services import PostService

    store = CachedPostRepository.wrap(
        inner=SqlPostRepository.from_engine(),
        cache=RedisCacheBackend.create(),
    )
    service = PostService.create(repository=store)
    ```

For HTTP API:
    ```python
    from post_cache.api.app import app
    ```
"""

from post_cache.config import get_redis_client, settings
from post_cache.dto import CreatePostRequest, PostResponse, UpdatePostRequest
from post_cache.entities import PostEntity
from post_cache.errors import InvalidInputError, PostError, PostNotFoundError, StoreFailureError
from post_cache.handlers import PostHandler
from post_cache.protocols import CacheBackend, PostStore
from post_cache.repositories import CachedPostRepository, RedisCacheBackend, SqlPostRepository
from post_cache.services import PostService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "PostStore",
    "CacheBackend",
    # Errors
    "PostError",
    "PostNotFoundError",
    "InvalidInputError",
    "StoreFailureError",
    # Services (business logic)
    "PostService",
    # Handlers (HTTP)
    "PostHandler",
    # Repositories (data access)
    "SqlPostRepository",
    "RedisCacheBackend",
    "CachedPostRepository",
    # Entities (domain models)
    "PostEntity",
    # DTOs (API contracts)
    "CreatePostRequest",
    "UpdatePostRequest",
    "PostResponse",
]

"""Service layer for business logic.

This layer contains the business rules and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from post_cache.services import PostService

    service = PostService.create(repository=repo)
    ```
"""

from .post_service import PostService

__all__ = [
    "PostService",
]

"""Post service for core business logic.

This service applies business rules and delegates persistence to whatever
PostStore it was given, cached or not.
"""

from uuid import UUID

from post_cache.entities import PostEntity
from post_cache.errors import InvalidInputError
from post_cache.protocols import PostStore


class PostService:
    """Post use cases.

    This service depends on the PostStore PROTOCOL, not a concrete
    implementation, so the caching decorator can be added or removed
    without changing the service code.

    Example:
        ```python
        from post_cache.services import PostService

        service = PostService.create(repository=SqlPostRepository.from_engine())

        # Or with the cache in front of the database
        service = PostService.create(
            repository=CachedPostRepository.wrap(
                inner=SqlPostRepository.from_engine(),
                cache=RedisCacheBackend.create(),
            ),
        )
        ```
    """

    def __init__(self, repository: PostStore) -> None:
        """Initialize the post service.

        Args:
            repository: Post storage backend (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: PostStore) -> "PostService":
        """Factory method to create PostService.

        Args:
            repository: Post storage backend (required).

        Returns:
            Configured PostService instance
        """
        return cls(repository=repository)

    async def list_posts(self) -> list[PostEntity]:
        return await self._repository.list_posts()

    async def get(self, post_id: UUID) -> PostEntity:
        return await self._repository.get(post_id)

    async def create_post(self, title: str, content: str) -> PostEntity:
        """Create a post after validating it.

        Raises:
            InvalidInputError: If the title is empty or blank
        """
        self._validate_title(title)
        return await self._repository.create(title, content)

    async def update(self, post_id: UUID, title: str, content: str) -> PostEntity:
        """Update a post after validating it.

        Raises:
            InvalidInputError: If the title is empty or blank
            PostNotFoundError: If the post does not exist
        """
        self._validate_title(title)
        return await self._repository.update(post_id, title, content)

    async def delete(self, post_id: UUID) -> None:
        await self._repository.delete(post_id)

    async def is_healthy(self) -> bool:
        """Check if the store of record is healthy."""
        return await self._repository.health_check()

    @staticmethod
    def _validate_title(title: str) -> None:
        if not title or not title.strip():
            raise InvalidInputError("Title cannot be empty")

    @property
    def repository(self) -> PostStore:
        """Get the underlying repository (for testing)."""
        return self._repository

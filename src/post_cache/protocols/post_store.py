"""Post store protocol.

Defines the persistence contract for posts. Both the direct database
repository and the caching decorator satisfy it, so either can be handed
to the service layer.

Implementations can include:
- SQLAlchemy repository over PostgreSQL (default)
- CachedPostRepository wrapping any other implementation
- In-memory fakes for tests
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from post_cache.entities import PostEntity


@runtime_checkable
class PostStore(Protocol):
    """Protocol for post persistence backends.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Every operation may raise a ``PostError`` subclass; nothing else is
    part of the contract.

    Example:
        ```python
        from post_cache.protocols import PostStore

        store: PostStore = SqlPostRepository.from_engine()
        store: PostStore = CachedPostRepository.wrap(inner=store, cache=backend)
        ```
    """

    async def list_posts(self) -> list[PostEntity]:
        """Return all posts.

        Returns:
            All stored posts, in the store's order

        Raises:
            StoreFailureError: If the backend could not be queried
        """
        ...

    async def get(self, post_id: UUID) -> PostEntity:
        """Return a single post.

        Args:
            post_id: Identifier of the post

        Returns:
            The matching post

        Raises:
            PostNotFoundError: If no post has that identifier
        """
        ...

    async def create(self, title: str, content: str) -> PostEntity:
        """Create a post; the store assigns its id and creation time.

        Args:
            title: Post title
            content: Post body

        Returns:
            The created post
        """
        ...

    async def update(self, post_id: UUID, title: str, content: str) -> PostEntity:
        """Replace the title and content of an existing post.

        The original ``created_at`` is preserved.

        Raises:
            PostNotFoundError: If no post has that identifier
        """
        ...

    async def delete(self, post_id: UUID) -> None:
        """Delete a post.

        Raises:
            PostNotFoundError: If no post has that identifier
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...

"""HTTP handlers for post operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error translation.
"""

from uuid import UUID

from fastapi import HTTPException, status

from post_cache.dto import CreatePostRequest, HealthCheckResponse, PostResponse, UpdatePostRequest
from post_cache.errors import InvalidInputError, PostError, PostNotFoundError
from post_cache.protocols import CacheBackend
from post_cache.services import PostService


def _http_error(error: PostError, action: str) -> HTTPException:
    """Translate a domain error into the matching HTTP error."""
    if isinstance(error, PostNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, InvalidInputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {error}",
    )


class PostHandler:
    """HTTP handlers for post operations.

    This handler delegates business logic to PostService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Translating PostError subclasses into HTTP errors

    Example:
        ```python
        handler = PostHandler(post_service=service, cache=backend)

        @app.get("/posts/{post_id}", response_model=PostResponse)
        async def get_post(post_id: UUID):
            return await handler.get_post(post_id)
        ```
    """

    def __init__(self, post_service: PostService, cache: CacheBackend | None = None) -> None:
        """Initialize the post handler.

        Args:
            post_service: The post service for business logic (required).
            cache: Cache backend, only used for health reporting.
        """
        self._posts = post_service
        self._cache = cache

    async def list_posts(self) -> list[PostResponse]:
        """Handle GET /posts requests."""
        try:
            posts = await self._posts.list_posts()
        except PostError as e:
            raise _http_error(e, "list posts") from e

        return [PostResponse.from_entity(post) for post in posts]

    async def get_post(self, post_id: UUID) -> PostResponse:
        """Handle GET /posts/{post_id} requests.

        Raises:
            HTTPException: 404 if the post does not exist
        """
        try:
            post = await self._posts.get(post_id)
        except PostError as e:
            raise _http_error(e, "get post") from e

        return PostResponse.from_entity(post)

    async def create_post(self, request: CreatePostRequest) -> PostResponse:
        """Handle POST /posts requests.

        Raises:
            HTTPException: 400 if the title is blank
        """
        try:
            post = await self._posts.create_post(title=request.title, content=request.content)
        except PostError as e:
            raise _http_error(e, "create post") from e

        return PostResponse.from_entity(post)

    async def update_post(self, post_id: UUID, request: UpdatePostRequest) -> PostResponse:
        """Handle PUT /posts/{post_id} requests."""
        try:
            post = await self._posts.update(post_id, title=request.title, content=request.content)
        except PostError as e:
            raise _http_error(e, "update post") from e

        return PostResponse.from_entity(post)

    async def delete_post(self, post_id: UUID) -> None:
        """Handle DELETE /posts/{post_id} requests."""
        try:
            await self._posts.delete(post_id)
        except PostError as e:
            raise _http_error(e, "delete post") from e

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Only the database decides overall health; a cache outage is reported
        but does not make the service unhealthy.
        """
        database_healthy = await self._posts.is_healthy()
        cache_healthy = await self._cache.health_check() if self._cache is not None else None

        return HealthCheckResponse(
            status="healthy" if database_healthy else "unhealthy",
            database_healthy=database_healthy,
            cache_healthy=cache_healthy,
        )

"""Error taxonomy for post operations.

Every layer above the store sees exactly these exceptions. Cache problems
are never raised through this hierarchy; the cache adapter absorbs them.
"""


class PostError(Exception):
    """Base class for all post errors."""


class PostNotFoundError(PostError):
    """Raised when no post exists for the requested identifier."""

    def __init__(self, post_id: object | None = None) -> None:
        self.post_id = post_id
        message = "post not found" if post_id is None else f"post not found: {post_id}"
        super().__init__(message)


class InvalidInputError(PostError):
    """Raised when caller-supplied data fails a business rule."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StoreFailureError(PostError):
    """Raised when the persistence backend could not complete an operation."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"database error: {detail}")

"""Post domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PostEntity:
    """Domain entity for a stored post.

    This is an internal representation used by services and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        id: Identifier assigned by the store, stable for the post's lifetime
        title: Non-empty post title
        content: Post body text
        created_at: When the store created the post (UTC, never changes)
    """

    id: UUID
    title: str
    content: str
    created_at: datetime

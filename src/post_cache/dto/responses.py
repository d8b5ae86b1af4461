"""Response DTOs for API endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from post_cache.entities import PostEntity


class PostResponse(BaseModel):
    """Response DTO for a single post."""

    id: UUID = Field(..., description="Post identifier")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body text")
    created_at: datetime = Field(..., description="When the post was created (UTC)")

    @classmethod
    def from_entity(cls, post: PostEntity) -> "PostResponse":
        return cls(id=post.id, title=post.title, content=post.content, created_at=post.created_at)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    database_healthy: bool = Field(..., description="Whether the post database is reachable")
    cache_healthy: bool | None = Field(
        None,
        description="Whether the cache backend is reachable (None when caching is disabled)",
    )

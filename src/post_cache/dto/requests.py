"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Request DTO for creating a post.

    The handler will convert this to internal calls to the service layer.
    """

    title: str = Field(..., description="Post title", min_length=1, max_length=255)
    content: str = Field(..., description="Post body text")


class UpdatePostRequest(BaseModel):
    """Request DTO for replacing a post's title and content."""

    title: str = Field(..., description="New post title", min_length=1, max_length=255)
    content: str = Field(..., description="New post body text")

from typing import Any
from uuid import UUID

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware

from post_cache.api.dependencies import HandlerDep, lifespan
from post_cache.config import settings
from post_cache.dto import CreatePostRequest, HealthCheckResponse, PostResponse, UpdatePostRequest

API_NAME = "Post Cache API"
API_VERSION = "0.1.0"

app = FastAPI(
    title=API_NAME,
    description="Post CRUD service backed by PostgreSQL with a Redis read cache",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint, doubles as a liveness probe."""
    return {
        "status": "ok",
        "name": API_NAME,
        "version": API_VERSION,
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
    """Readiness check for the database and the cache."""
    result = await handler.health_check()
    if result.status != "healthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@app.get("/posts", response_model=list[PostResponse])
async def list_posts(handler: HandlerDep) -> list[PostResponse]:
    """List all posts."""
    return await handler.list_posts()


@app.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(request: CreatePostRequest, handler: HandlerDep) -> PostResponse:
    """Create a post."""
    return await handler.create_post(request)


@app.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID, handler: HandlerDep) -> PostResponse:
    """Get a single post."""
    return await handler.get_post(post_id)


@app.put("/posts/{post_id}", response_model=PostResponse)
async def update_post(post_id: UUID, request: UpdatePostRequest, handler: HandlerDep) -> PostResponse:
    """Replace a post's title and content."""
    return await handler.update_post(post_id, request)


@app.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_post(post_id: UUID, handler: HandlerDep) -> Response:
    """Delete a post."""
    await handler.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "post_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )

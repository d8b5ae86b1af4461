"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request

from post_cache.config import get_engine, settings
from post_cache.handlers import PostHandler
from post_cache.logging_config import configure_logging
from post_cache.models import create_schema
from post_cache.protocols import PostStore
from post_cache.repositories import CachedPostRepository, RedisCacheBackend, SqlPostRepository
from post_cache.services import PostService

logger = structlog.get_logger(__name__)


def get_handler(request: Request) -> PostHandler:
    """Dependency injection for PostHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "post_handler", None)
    if handler is None:
        raise RuntimeError("PostHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository (data access) - SQL store, wrapped in the Redis cache when enabled
    2. Service (business logic) - owned by the handler
    3. Handler (HTTP endpoints) - stored in app.state.post_handler

    Cleanup:
        Removes all services from app.state and releases connection pools
    """
    configure_logging()

    engine = get_engine()
    await create_schema(engine)

    repository: PostStore = SqlPostRepository.from_engine(engine)
    cache_backend: RedisCacheBackend | None = None
    if settings.cache_enabled:
        cache_backend = RedisCacheBackend.create()
        repository = CachedPostRepository.wrap(inner=repository, cache=cache_backend)

    post_service = PostService.create(repository=repository)
    post_handler = PostHandler(post_service=post_service, cache=cache_backend)

    # Store in app.state (FastAPI pattern)
    app.state.post_handler = post_handler

    logger.info(
        "Post service initialized",
        cache_enabled=settings.cache_enabled,
        cache_ttl=settings.cache_ttl,
        cache_timeout=settings.cache_timeout,
    )

    yield

    del app.state.post_handler
    if cache_backend is not None:
        await cache_backend.close()
    await engine.dispose()
    logger.info("Post service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[PostHandler, Depends(get_handler)]

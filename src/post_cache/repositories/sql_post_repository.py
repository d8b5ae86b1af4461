"""SQLAlchemy implementation of PostStore.

This is the store of record. It owns identifier and timestamp assignment
and translates every database failure into ``StoreFailureError``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from uuid import UUID, uuid4

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from post_cache.config import get_engine
from post_cache.entities import PostEntity
from post_cache.errors import InvalidInputError, PostNotFoundError, StoreFailureError
from post_cache.models import PostModel

logger = structlog.get_logger(__name__)

_DB_ERRORS = (SQLAlchemyError, OSError)


def _to_entity(row: PostModel) -> PostEntity:
    created_at = row.created_at
    # SQLite drops the offset; every timestamp we write is UTC.
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return PostEntity(id=row.id, title=row.title, content=row.content, created_at=created_at)


class SqlPostRepository:
    """Post repository over an async SQLAlchemy engine.

    This class satisfies the PostStore protocol through structural
    typing - no explicit inheritance needed. Each operation runs in its
    own session, so one instance can serve concurrent requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the repository.

        Args:
            session_factory: Factory producing one AsyncSession per operation.
        """
        self._session_factory = session_factory

    @classmethod
    def from_engine(cls, engine: AsyncEngine | None = None) -> "SqlPostRepository":
        """Factory method to create SqlPostRepository with defaults.

        Not named ``create``: that name belongs to the PostStore operation.

        Args:
            engine: Async engine to use. If None, creates one from settings.

        Returns:
            Configured SqlPostRepository
        """
        engine = engine or get_engine()
        return cls(async_sessionmaker(engine, expire_on_commit=False))

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except _DB_ERRORS as e:
            logger.error("Repository: operation failed", operation=operation, error=str(e), exc_info=True)
            raise StoreFailureError(str(e)) from e

    async def list_posts(self) -> list[PostEntity]:
        async with self._session("list_posts") as session:
            result = await session.execute(
                select(PostModel).order_by(PostModel.created_at, PostModel.id)
            )
            rows = result.scalars().all()

        logger.debug("Repository: posts listed", count=len(rows))
        return [_to_entity(row) for row in rows]

    async def get(self, post_id: UUID) -> PostEntity:
        async with self._session("get") as session:
            row = await session.get(PostModel, post_id)

        if row is None:
            raise PostNotFoundError(post_id)
        return _to_entity(row)

    async def create(self, title: str, content: str) -> PostEntity:
        if not title:
            raise InvalidInputError("Title cannot be empty")

        row = PostModel(
            id=uuid4(),
            title=title,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        async with self._session("create") as session:
            session.add(row)
            await session.commit()

        logger.info("Repository: post created", post_id=str(row.id))
        return _to_entity(row)

    async def update(self, post_id: UUID, title: str, content: str) -> PostEntity:
        if not title:
            raise InvalidInputError("Title cannot be empty")

        async with self._session("update") as session:
            row = await session.get(PostModel, post_id)
            if row is None:
                raise PostNotFoundError(post_id)

            row.title = title
            row.content = content
            await session.commit()

        logger.info("Repository: post updated", post_id=str(post_id))
        return _to_entity(row)

    async def delete(self, post_id: UUID) -> None:
        async with self._session("delete") as session:
            row = await session.get(PostModel, post_id)
            if row is None:
                raise PostNotFoundError(post_id)

            await session.delete(row)
            await session.commit()

        logger.info("Repository: post deleted", post_id=str(post_id))

    async def health_check(self) -> bool:
        """Check if the database is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
            return True
        except _DB_ERRORS:
            return False

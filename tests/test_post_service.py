"""
Tests for the post service business rules.
"""

from uuid import uuid4

import pytest

from post_cache.errors import InvalidInputError, PostNotFoundError
from post_cache.services import PostService


@pytest.fixture
def service(cached_repo):
    return PostService.create(repository=cached_repo)


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["", "   ", "\n\t"])
async def test_blank_title_rejected_before_store(service, store, cache, title):
    with pytest.raises(InvalidInputError, match="Title cannot be empty"):
        await service.create_post(title=title, content="body")

    assert store.calls["create"] == 0
    assert cache.deletes == []


@pytest.mark.asyncio
async def test_blank_title_rejected_on_update(service, store):
    post = await service.create_post(title="title", content="body")

    with pytest.raises(InvalidInputError):
        await service.update(post.id, title=" ", content="body")

    assert store.calls["update"] == 0
    assert (await service.get(post.id)).title == "title"


@pytest.mark.asyncio
async def test_crud_through_service(service):
    post = await service.create_post(title="title", content="body")
    assert await service.list_posts() == [post]

    updated = await service.update(post.id, title="new", content="text")
    assert await service.get(post.id) == updated

    await service.delete(post.id)
    assert await service.list_posts() == []


@pytest.mark.asyncio
async def test_not_found_propagates_unchanged(service):
    with pytest.raises(PostNotFoundError):
        await service.get(uuid4())


@pytest.mark.asyncio
async def test_health_follows_store(service, store, store_failure):
    assert await service.is_healthy() is True

    store.failure = store_failure
    assert await service.is_healthy() is False

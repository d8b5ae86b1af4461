"""JSON encoding of posts for the cache.

Decoding never raises: anything that does not validate back into posts is
reported as None, which callers treat exactly like a cache miss.
"""

from pydantic import TypeAdapter, ValidationError

from post_cache.entities import PostEntity

_post_adapter = TypeAdapter(PostEntity)
_posts_adapter = TypeAdapter(list[PostEntity])


def encode_post(post: PostEntity) -> bytes:
    """Encode a single post as JSON bytes."""
    return _post_adapter.dump_json(post)


def decode_post(data: bytes) -> PostEntity | None:
    """Decode a single post, or return None if the payload is unusable."""
    try:
        return _post_adapter.validate_json(data)
    except ValidationError:
        return None


def encode_posts(posts: list[PostEntity]) -> bytes:
    """Encode a collection of posts as a JSON array."""
    return _posts_adapter.dump_json(posts)


def decode_posts(data: bytes) -> list[PostEntity] | None:
    """Decode a collection of posts, or return None if the payload is unusable."""
    try:
        return _posts_adapter.validate_json(data)
    except ValidationError:
        return None

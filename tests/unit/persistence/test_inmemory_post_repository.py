"""Unit tests for the in-memory post repository."""

from uuid import uuid4

import pytest

from humor.domain.error import ConcurrentModificationError, NotFoundError
from humor.domain.model import Post
from humor.domain.value import PostId, UserId
from humor.persistence.repository.inmemory import InMemoryPostRepository


def _post() -> Post:
    return Post(id=PostId(uuid4()), author_id=UserId(uuid4()), text="x", category="y")


class TestReplace:
    """Tests for compare-and-set writes."""

    @pytest.mark.asyncio
    async def test_replace_bumps_version(self):
        repo = InMemoryPostRepository()
        post = await repo.add(_post())

        saved = await repo.replace(post.model_copy(update={"text": "z"}))

        assert saved.version == 1
        assert (await repo.find_by_id(post.id)).text == "z"

    @pytest.mark.asyncio
    async def test_stale_version_rejected(self):
        repo = InMemoryPostRepository()
        post = await repo.add(_post())
        await repo.replace(post)

        with pytest.raises(ConcurrentModificationError):
            await repo.replace(post.model_copy(update={"text": "stale"}))

    @pytest.mark.asyncio
    async def test_missing_post(self):
        repo = InMemoryPostRepository()

        with pytest.raises(NotFoundError):
            await repo.replace(_post())

"""Integration tests for PostgresPostRepository.

These tests verify the versioned JSONB document write against PostgreSQL.
Each request scope is its own session and transaction.
"""

import asyncio
from uuid import uuid4

import pytest
import pytest_asyncio

from humor.domain.error import ConcurrentModificationError, NotFoundError
from humor.domain.model import Comment
from humor.domain.repository import PostRepository
from humor.domain.service import CommentService, PostService, ReactionService, UserService
from humor.domain.value import CommentId, HumorTag, ReactionType
from humor.domain.value.types import Handle
from tests.di import build_test_container
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def postgres():
    """App container on PostgreSQL; tests open their own request scopes."""
    container = build_test_container(unmock={"persistence"})
    yield container
    await container.close()


async def _register(container, name: str):
    async with container() as request:
        users = await request.get(UserService)
        return await users.register(
            Handle(f"{name}_{uuid4().hex[:8]}"), "pw", HumorTag.DRY
        )


async def _create_post(container, author):
    async with container() as request:
        posts = await request.get(PostService)
        return await posts.create_post(author.id, "Knock knock", "Classic")


class TestPostRepositoryIntegration:
    """Version checks and document round-trips on the posts table."""

    @pytest.mark.asyncio
    async def test_document_round_trip(self, postgres):
        alice = await _register(postgres, "alice")
        bob = await _register(postgres, "bob")
        post = await _create_post(postgres, alice)

        async with postgres() as request:
            comments = await request.get(CommentService)
            root = await comments.add_comment(post.id, bob.id, "Who's there?")
            reply = await comments.add_comment(
                post.id, alice.id, "Interrupting cow", root.comment.id
            )
            reactions = await request.get(ReactionService)
            await reactions.react_to_comment(
                post.id, reply.comment.id, bob.id, ReactionType.WOW
            )
            await reactions.react_to_post(post.id, bob.id, ReactionType.CLEVER)

        async with postgres() as request:
            repo = await request.get(PostRepository)
            stored = await repo.find_by_id(post.id)

        assert stored.version == 4
        assert [(c.text, d) for c, d in stored.comments.walk()] == [
            ("Who's there?", 0),
            ("Interrupting cow", 1),
        ]
        leaf = stored.comments.find(reply.comment.id)
        assert leaf.parent_id == root.comment.id
        assert leaf.reactions[0].type == ReactionType.WOW
        assert leaf.reactions[0].users == (bob.id,)
        assert stored.reactions[0].type == ReactionType.CLEVER

    @pytest.mark.asyncio
    async def test_stale_version_is_rejected(self, postgres):
        alice = await _register(postgres, "alice")
        post = await _create_post(postgres, alice)
        comment = Comment(id=CommentId(uuid4()), author_id=alice.id, text="first")

        async with postgres() as request:
            repo = await request.get(PostRepository)
            current = await repo.find_by_id(post.id)
            saved = await repo.replace(
                current.model_copy(update={"comments": current.comments.append(comment)})
            )
        assert saved.version == current.version + 1

        async with postgres() as request:
            repo = await request.get(PostRepository)
            with pytest.raises(ConcurrentModificationError):
                await repo.replace(current.model_copy(update={"text": "stale"}))

        async with postgres() as request:
            repo = await request.get(PostRepository)
            stored = await repo.find_by_id(post.id)
        assert stored.text == "Knock knock"
        assert stored.version == saved.version
        assert stored.comments.find(comment.id) is not None

    @pytest.mark.asyncio
    async def test_replace_deleted_post(self, integration_env):
        users = await integration_env.get(UserService)
        posts = await integration_env.get(PostService)
        repo = await integration_env.get(PostRepository)
        alice = await users.register(
            Handle(f"alice_{uuid4().hex[:8]}"), "pw", HumorTag.DRY
        )
        post = await posts.create_post(alice.id, "Knock knock", "Classic")
        await repo.delete(post.id)

        with pytest.raises(NotFoundError):
            await repo.replace(post)

    @pytest.mark.asyncio
    async def test_concurrent_replies_both_survive(self, postgres):
        alice = await _register(postgres, "alice")
        bob = await _register(postgres, "bob")
        carol = await _register(postgres, "carol")
        post = await _create_post(postgres, alice)

        async with postgres() as request:
            comments = await request.get(CommentService)
            root = await comments.add_comment(post.id, alice.id, "Tell me one")

        async def reply(user, text):
            async with postgres() as request:
                comments = await request.get(CommentService)
                return await comments.add_comment(
                    post.id, user.id, text, root.comment.id
                )

        first, second = await asyncio.gather(
            reply(bob, "Lettuce"), reply(carol, "Lettuce who?")
        )

        async with postgres() as request:
            repo = await request.get(PostRepository)
            stored = await repo.find_by_id(post.id)

        children = {c.id for c in stored.comments.children_of(root.comment.id)}
        assert children == {first.comment.id, second.comment.id}
        assert stored.version == 3

    @pytest.mark.asyncio
    async def test_concurrent_reactions_both_survive(self, postgres):
        alice = await _register(postgres, "alice")
        bob = await _register(postgres, "bob")
        carol = await _register(postgres, "carol")
        post = await _create_post(postgres, alice)

        async def react(user):
            async with postgres() as request:
                reactions = await request.get(ReactionService)
                return await reactions.react_to_post(
                    post.id, user.id, ReactionType.AMUSED
                )

        await asyncio.gather(react(bob), react(carol))

        async with postgres() as request:
            repo = await request.get(PostRepository)
            stored = await repo.find_by_id(post.id)

        [amused] = stored.reactions
        assert set(amused.users) == {bob.id, carol.id}

"""Unit tests for ReactionService."""

import asyncio
from uuid import uuid4

import pytest

from humor.domain.error import NotFoundError, ValidationError
from humor.domain.model import Reaction, reaction_of
from humor.domain.repository import NotificationRepository
from humor.domain.service import (
    CommentService,
    PostService,
    ReactionService,
    UserService,
)
from humor.domain.value import (
    CommentId,
    HumorTag,
    NotificationType,
    PostId,
    ReactionType,
)
from humor.domain.value.types import Handle
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(env):
    users = await env.get(UserService)
    posts = await env.get(PostService)
    alice = await users.register(Handle("alice"), "pw-alice", HumorTag.DRY)
    bob = await users.register(Handle("bob"), "pw-bob", HumorTag.PUNNY)
    post = await posts.create_post(alice.id, "Why did the chicken...", "Classic")
    return alice, bob, post


class TestReactToPost:
    """Tests for react_to_post."""

    @pytest.mark.asyncio
    async def test_switch_and_toggle_notifications(self, unit_env):
        """Clever, Amused, Amused: two notifications, reaction removed at the end."""
        alice, bob, post = await _setup(unit_env)
        service = await unit_env.get(ReactionService)
        notifications = await unit_env.get(NotificationRepository)

        first = await service.react_to_post(post.id, bob.id, "Clever")
        assert first.current_type is ReactionType.CLEVER
        assert first.notification_type is NotificationType.REACTION

        second = await service.react_to_post(post.id, bob.id, ReactionType.AMUSED)
        assert second.previous_type is ReactionType.CLEVER
        assert reaction_of(second.post.reactions, bob.id) is ReactionType.AMUSED

        third = await service.react_to_post(post.id, bob.id, ReactionType.AMUSED)
        assert third.current_type is None
        assert third.notification_type is None
        assert reaction_of(third.post.reactions, bob.id) is None

        feed = await notifications.find_by_recipient(alice.id)
        assert len(feed) == 2
        assert {n.reaction_type for n in feed} == {
            ReactionType.CLEVER,
            ReactionType.AMUSED,
        }
        assert all(n.sender_id == bob.id for n in feed)

    @pytest.mark.asyncio
    async def test_clever_toggle_then_amused(self, unit_env):
        """Clever, Clever, Amused: the toggle-off leaves the first notice unread."""
        alice, bob, post = await _setup(unit_env)
        service = await unit_env.get(ReactionService)
        notifications = await unit_env.get(NotificationRepository)

        first = await service.react_to_post(post.id, bob.id, ReactionType.CLEVER)
        assert first.post.reactions == (
            Reaction(type=ReactionType.CLEVER, users=(bob.id,)),
        )
        assert await notifications.count_unread(alice.id) == 1
        [clever_notice] = await notifications.find_by_recipient(alice.id)

        toggled = await service.react_to_post(post.id, bob.id, ReactionType.CLEVER)
        assert toggled.post.reactions == ()
        assert toggled.notification_type is None
        assert await notifications.count_unread(alice.id) == 1
        [still_there] = await notifications.find_by_recipient(alice.id)
        assert still_there.id == clever_notice.id
        assert still_there.is_read is False

        amused = await service.react_to_post(post.id, bob.id, ReactionType.AMUSED)
        assert amused.post.reactions == (
            Reaction(type=ReactionType.AMUSED, users=(bob.id,)),
        )
        assert await notifications.count_unread(alice.id) == 2
        feed = await notifications.find_by_recipient(alice.id)
        assert [n.reaction_type for n in feed] == [
            ReactionType.AMUSED,
            ReactionType.CLEVER,
        ]

    @pytest.mark.asyncio
    async def test_author_reacting_to_own_post_is_silent(self, unit_env):
        alice, _, post = await _setup(unit_env)
        service = await unit_env.get(ReactionService)
        notifications = await unit_env.get(NotificationRepository)

        outcome = await service.react_to_post(post.id, alice.id, ReactionType.WOW)

        assert outcome.notification_type is None
        assert await notifications.count_unread(alice.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_reaction_type_rejected(self, unit_env):
        _, bob, post = await _setup(unit_env)
        service = await unit_env.get(ReactionService)

        with pytest.raises(ValidationError):
            await service.react_to_post(post.id, bob.id, "Meh")

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        _, bob, _ = await _setup(unit_env)
        service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await service.react_to_post(PostId(uuid4()), bob.id, ReactionType.WOW)

    @pytest.mark.asyncio
    async def test_concurrent_reactions_are_all_kept(self, unit_env):
        _, _, post = await _setup(unit_env)
        users = await unit_env.get(UserService)
        service = await unit_env.get(ReactionService)
        posts = await unit_env.get(PostService)

        fans = [
            await users.register(Handle(f"fan{i}"), "pw", HumorTag.WHOLESOME)
            for i in range(5)
        ]
        await asyncio.gather(
            *(service.react_to_post(post.id, f.id, ReactionType.AMUSED) for f in fans)
        )

        stored = await posts.require_post(post.id)
        assert all(reaction_of(stored.reactions, f.id) for f in fans)
        assert stored.version == 5


class TestReactToComment:
    """Tests for react_to_comment."""

    @pytest.mark.asyncio
    async def test_reacts_to_nested_comment_without_notifying(self, unit_env):
        alice, bob, post = await _setup(unit_env)
        comments = await unit_env.get(CommentService)
        service = await unit_env.get(ReactionService)
        notifications = await unit_env.get(NotificationRepository)

        root = await comments.add_comment(post.id, alice.id, "root")
        reply = await comments.add_comment(
            post.id, alice.id, "reply", parent_id=root.comment.id
        )

        outcome = await service.react_to_comment(
            post.id, reply.comment.id, bob.id, ReactionType.CLEVER
        )

        stored = outcome.post.comments.find(reply.comment.id)
        assert reaction_of(stored.reactions, bob.id) is ReactionType.CLEVER
        assert outcome.notification_type is None
        assert await notifications.count_unread(alice.id) == 0

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        _, bob, post = await _setup(unit_env)
        service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await service.react_to_comment(
                post.id, CommentId(uuid4()), bob.id, ReactionType.WOW
            )

"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from humor.domain.error import NotFoundError
from humor.domain.repository import NotificationRepository
from humor.domain.service import NotificationService, PostService, UserService
from humor.domain.service.notification_service import render_message
from humor.domain.value import (
    HumorTag,
    NotificationId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)
from humor.domain.value.types import Handle
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(env):
    users = await env.get(UserService)
    posts = await env.get(PostService)
    alice = await users.register(Handle("alice"), "pw", HumorTag.DRY)
    bob = await users.register(Handle("bob"), "pw", HumorTag.DRY)
    post = await posts.create_post(alice.id, "A pun walks into a bar", "Puns")
    return alice, bob, post


class TestRenderMessage:
    """Tests for message text."""

    def test_reaction(self):
        assert (
            render_message(NotificationType.REACTION, "bob", ReactionType.WOW)
            == "bob reacted with ...Wow to your post"
        )

    def test_comment(self):
        assert (
            render_message(NotificationType.COMMENT, "bob", None)
            == "bob commented on your post"
        )

    def test_reply(self):
        assert (
            render_message(NotificationType.REPLY, "bob", None)
            == "bob replied to a comment on your post"
        )


class TestNotify:
    """Tests for notify."""

    @pytest.mark.asyncio
    async def test_self_notification_suppressed(self, unit_env):
        alice, _, post = await _setup(unit_env)
        service = await unit_env.get(NotificationService)

        result = await service.notify(
            alice.id, alice.id, NotificationType.COMMENT, post.id
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_unread_duplicate_suppressed_until_read(self, unit_env):
        alice, bob, post = await _setup(unit_env)
        service = await unit_env.get(NotificationService)

        first = await service.notify(alice.id, bob.id, NotificationType.COMMENT, post.id)
        duplicate = await service.notify(
            alice.id, bob.id, NotificationType.COMMENT, post.id
        )
        await service.mark_read(first.id, alice.id)
        again = await service.notify(alice.id, bob.id, NotificationType.COMMENT, post.id)

        assert first is not None
        assert duplicate is None
        assert again is not None and again.id != first.id

    @pytest.mark.asyncio
    async def test_missing_post_skipped(self, unit_env):
        alice, bob, _ = await _setup(unit_env)
        service = await unit_env.get(NotificationService)

        result = await service.notify(
            alice.id, bob.id, NotificationType.COMMENT, PostId(uuid4())
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_repository_failure_is_swallowed(self, unit_env):
        alice, bob, post = await _setup(unit_env)
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)

        async def broken_save(notification):
            raise RuntimeError("disk full")

        repo.save = broken_save

        result = await service.notify(alice.id, bob.id, NotificationType.COMMENT, post.id)

        assert result is None


class TestReadState:
    """Tests for marking notifications read."""

    @pytest.mark.asyncio
    async def test_mark_all_read_only_touches_recipient(self, unit_env):
        alice, bob, post = await _setup(unit_env)
        posts = await unit_env.get(PostService)
        service = await unit_env.get(NotificationService)
        bob_post = await posts.create_post(bob.id, "Dad joke", "Dad")

        await service.notify(alice.id, bob.id, NotificationType.COMMENT, post.id)
        await service.notify(
            alice.id,
            bob.id,
            NotificationType.REACTION,
            post.id,
            reaction_type=ReactionType.WOW,
        )
        await service.notify(bob.id, alice.id, NotificationType.COMMENT, bob_post.id)

        assert await service.mark_all_read(alice.id) == 2
        assert await service.unread_count(alice.id) == 0
        assert await service.unread_count(bob.id) == 1

    @pytest.mark.asyncio
    async def test_mark_read_of_other_users_notification_not_found(self, unit_env):
        alice, bob, post = await _setup(unit_env)
        service = await unit_env.get(NotificationService)
        notification = await service.notify(
            alice.id, bob.id, NotificationType.COMMENT, post.id
        )

        with pytest.raises(NotFoundError):
            await service.mark_read(notification.id, bob.id)

        assert await service.unread_count(alice.id) == 1

    @pytest.mark.asyncio
    async def test_mark_read_unknown_id(self, unit_env):
        service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await service.mark_read(NotificationId(uuid4()), UserId(uuid4()))


class TestFeed:
    """Tests for list_for_recipient."""

    @pytest.mark.asyncio
    async def test_feed_is_capped_at_fifty_newest_first(self, unit_env):
        alice, bob, post = await _setup(unit_env)
        service = await unit_env.get(NotificationService)

        created = []
        for _ in range(60):
            notification = await service.notify(
                alice.id, bob.id, NotificationType.COMMENT, post.id
            )
            # Reading it lets the next identical action notify again
            await service.mark_read(notification.id, alice.id)
            created.append(notification.id)

        feed = await service.list_for_recipient(alice.id)

        assert len(feed) == 50
        assert [n.id for n in feed] == list(reversed(created))[:50]
        assert all(a.created_at >= b.created_at for a, b in zip(feed, feed[1:]))

"""Unit tests for notification use cases."""

from uuid import uuid4

import pytest

from humor.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadUseCase,
    UnreadCountRequest,
    UnreadCountUseCase,
)
from humor.domain.error import NotFoundError
from humor.domain.service import (
    CommentService,
    PostService,
    ReactionService,
    UserService,
)
from humor.domain.value import HumorTag, ReactionType
from humor.domain.value.types import Handle
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _scenario(env):
    """Bob reacts twice and comments on Alice's post."""
    users = await env.get(UserService)
    posts = await env.get(PostService)
    reactions = await env.get(ReactionService)
    comments = await env.get(CommentService)

    alice = await users.register(Handle("alice"), "pw", HumorTag.DRY)
    bob = await users.register(Handle("bob"), "pw", HumorTag.PUNNY)
    post = await posts.create_post(alice.id, "Time flies like an arrow", "Puns")

    await reactions.react_to_post(post.id, bob.id, ReactionType.CLEVER)
    await reactions.react_to_post(post.id, bob.id, ReactionType.AMUSED)
    await comments.add_comment(post.id, bob.id, "Fruit flies like a banana")
    return alice, bob, post


class TestListNotifications:
    """Tests for ListNotificationsUseCase."""

    @pytest.mark.asyncio
    async def test_feed_newest_first_with_sender(self, unit_env):
        alice, bob, post = await _scenario(unit_env)
        use_case = await unit_env.get(ListNotificationsUseCase)

        response = await use_case.execute(ListNotificationsRequest(user_id=str(alice.id)))

        assert [n.type for n in response.notifications] == [
            "comment",
            "reaction",
            "reaction",
        ]
        assert response.notifications[0].message == "bob commented on your post"
        assert all(n.sender.handle == "bob" for n in response.notifications)
        assert all(n.post_id == str(post.id) for n in response.notifications)

    @pytest.mark.asyncio
    async def test_sender_has_empty_feed(self, unit_env):
        _, bob, _ = await _scenario(unit_env)
        use_case = await unit_env.get(ListNotificationsUseCase)

        response = await use_case.execute(ListNotificationsRequest(user_id=str(bob.id)))

        assert response.notifications == []


class TestReadState:
    """Tests for the read and count use cases."""

    @pytest.mark.asyncio
    async def test_mark_all_read_then_count(self, unit_env):
        alice, bob, _ = await _scenario(unit_env)
        mark_all = await unit_env.get(MarkAllReadUseCase)
        count = await unit_env.get(UnreadCountUseCase)

        before = await count.execute(UnreadCountRequest(user_id=str(alice.id)))
        result = await mark_all.execute(MarkAllReadRequest(user_id=str(alice.id)))
        after = await count.execute(UnreadCountRequest(user_id=str(alice.id)))

        assert before.count == 3
        assert result.updated == 3
        assert result.message == "All notifications marked as read"
        assert after.count == 0

    @pytest.mark.asyncio
    async def test_mark_read_by_other_user_not_found(self, unit_env):
        alice, bob, _ = await _scenario(unit_env)
        feed = await unit_env.get(ListNotificationsUseCase)
        mark_read = await unit_env.get(MarkReadUseCase)
        [first, *_] = (
            await feed.execute(ListNotificationsRequest(user_id=str(alice.id)))
        ).notifications

        with pytest.raises(NotFoundError):
            await mark_read.execute(
                MarkReadRequest(notification_id=first.id, user_id=str(bob.id))
            )

        view = await mark_read.execute(
            MarkReadRequest(notification_id=first.id, user_id=str(alice.id))
        )
        assert view.is_read is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("notification_id", ["garbage", str(uuid4())])
    async def test_mark_read_unknown(self, unit_env, notification_id):
        mark_read = await unit_env.get(MarkReadUseCase)

        with pytest.raises(NotFoundError):
            await mark_read.execute(
                MarkReadRequest(notification_id=notification_id, user_id=str(uuid4()))
            )

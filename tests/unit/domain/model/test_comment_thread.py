"""Unit tests for CommentThread."""

from uuid import uuid4

import pytest

from humor.domain.error import NotFoundError
from humor.domain.model import Comment, CommentThread
from humor.domain.value import CommentId, UserId


def _comment(parent: Comment | None = None, text: str = "lol") -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        author_id=UserId(uuid4()),
        text=text,
        parent_id=parent.id if parent else None,
    )


class TestAppend:
    """Tests for appending comments."""

    def test_root_comment_becomes_root(self):
        root = _comment()

        thread = CommentThread().append(root)

        assert thread.root_comments() == (root,)
        assert len(thread) == 1

    def test_reply_attaches_to_parent_at_any_depth(self):
        root = _comment()
        child = _comment(root)
        grandchild = _comment(child)

        thread = CommentThread().append(root).append(child).append(grandchild)

        assert thread.children_of(root.id) == (child,)
        assert thread.children_of(child.id) == (grandchild,)
        assert thread.depth_of(grandchild.id) == 2

    def test_unknown_parent_raises(self):
        orphan = Comment(
            id=CommentId(uuid4()),
            author_id=UserId(uuid4()),
            text="hello?",
            parent_id=CommentId(uuid4()),
        )

        with pytest.raises(NotFoundError):
            CommentThread().append(orphan)

    def test_append_does_not_modify_original(self):
        thread = CommentThread()

        thread.append(_comment())

        assert len(thread) == 0


class TestWalk:
    """Tests for traversal order."""

    def test_depth_first_with_siblings_in_insertion_order(self):
        a = _comment(text="a")
        a1 = _comment(a, "a1")
        a2 = _comment(a, "a2")
        a1x = _comment(a1, "a1x")
        b = _comment(text="b")

        thread = CommentThread()
        for c in (a, a1, b, a2, a1x):
            thread = thread.append(c)

        assert [(c.text, d) for c, d in thread.walk()] == [
            ("a", 0),
            ("a1", 1),
            ("a1x", 2),
            ("a2", 1),
            ("b", 0),
        ]

    def test_deep_thread_does_not_recurse(self):
        thread = CommentThread()
        parent = None
        for _ in range(1500):
            comment = _comment(parent)
            thread = thread.append(comment)
            parent = comment

        assert thread.depth_of(parent.id) == 1499
        [(last, depth)] = list(thread.walk())[-1:]
        assert last.id == parent.id
        assert depth == 1499


def test_find_missing_returns_none():
    assert CommentThread().append(_comment()).find(CommentId(uuid4())) is None


def test_replace_swaps_existing_node():
    root = _comment()
    thread = CommentThread().append(root)
    edited = root.model_copy(update={"text": "edited"})

    thread = thread.replace(edited)

    assert thread.find(root.id).text == "edited"

"""Unit tests for reaction transitions."""

from uuid import uuid4

from humor.domain.model import Reaction, apply_reaction, reaction_of
from humor.domain.value import ReactionType, UserId


def _user() -> UserId:
    return UserId(uuid4())


class TestApplyReaction:
    """Tests for apply_reaction."""

    def test_first_reaction_creates_entry(self):
        user = _user()

        reactions, previous = apply_reaction((), user, ReactionType.AMUSED)

        assert previous is None
        assert reactions == (Reaction(type=ReactionType.AMUSED, users=(user,)),)

    def test_same_type_toggles_off_and_drops_empty_entry(self):
        user = _user()
        reactions, _ = apply_reaction((), user, ReactionType.CLEVER)

        reactions, previous = apply_reaction(reactions, user, ReactionType.CLEVER)

        assert previous is ReactionType.CLEVER
        assert reactions == ()

    def test_different_type_moves_user(self):
        user = _user()
        other = _user()
        reactions, _ = apply_reaction((), user, ReactionType.CLEVER)
        reactions, _ = apply_reaction(reactions, other, ReactionType.CLEVER)

        reactions, previous = apply_reaction(reactions, user, ReactionType.AMUSED)

        assert previous is ReactionType.CLEVER
        assert reaction_of(reactions, user) is ReactionType.AMUSED
        clever = next(r for r in reactions if r.type is ReactionType.CLEVER)
        assert clever.users == (other,)

    def test_user_appears_in_at_most_one_entry(self):
        user = _user()
        reactions: tuple[Reaction, ...] = ()
        for reaction_type in (
            ReactionType.AMUSED,
            ReactionType.WOW,
            ReactionType.CLEVER,
            ReactionType.WOW,
        ):
            reactions, _ = apply_reaction(reactions, user, reaction_type)

        assert sum(1 for r in reactions if user in r.users) == 1
        assert reaction_of(reactions, user) is ReactionType.WOW

    def test_existing_entry_keeps_insertion_order(self):
        a, b = _user(), _user()
        reactions, _ = apply_reaction((), a, ReactionType.WOW)
        reactions, _ = apply_reaction(reactions, b, ReactionType.AMUSED)
        reactions, _ = apply_reaction(reactions, b, ReactionType.WOW)

        assert [r.type for r in reactions] == [ReactionType.WOW]
        assert reactions[0].users == (a, b)


def test_reaction_of_returns_none_without_reaction():
    assert reaction_of((), _user()) is None

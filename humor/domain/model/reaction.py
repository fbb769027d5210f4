"""Reactions on posts and comments.

A target (post or comment) holds an ordered collection of reaction entries,
one per reaction type in use. Each user appears in at most one entry.
"""

from collections.abc import Sequence

from pydantic import Field

from humor.domain.model.common import DomainModel
from humor.domain.value import ReactionType, UserId


class Reaction(DomainModel):
    """Users who reacted to a target with one reaction type."""

    type: ReactionType
    users: tuple[UserId, ...] = Field(default_factory=tuple)

    def with_user(self, user_id: UserId) -> "Reaction":
        if user_id in self.users:
            return self
        return self.model_copy(update={"users": self.users + (user_id,)})

    def without_user(self, user_id: UserId) -> "Reaction":
        return self.model_copy(
            update={"users": tuple(u for u in self.users if u != user_id)}
        )


def apply_reaction(
    reactions: Sequence[Reaction],
    user_id: UserId,
    reaction_type: ReactionType,
) -> tuple[tuple[Reaction, ...], ReactionType | None]:
    """Apply a user's reaction to a reaction collection.

    The user is first removed from every entry. If the type they held before
    differs from ``reaction_type`` they are added under ``reaction_type``;
    if it is the same, the reaction is toggled off. Entries left without
    users are dropped.

    Args:
        reactions: Current entries, in insertion order
        user_id: Reacting user
        reaction_type: Requested reaction type

    Returns:
        Tuple of (new entries, type the user held before or None)
    """
    previous_type: ReactionType | None = None
    updated: list[Reaction] = []

    for reaction in reactions:
        if user_id in reaction.users:
            if previous_type is None:
                previous_type = reaction.type
            reaction = reaction.without_user(user_id)
        updated.append(reaction)

    if previous_type != reaction_type:
        for index, reaction in enumerate(updated):
            if reaction.type == reaction_type:
                updated[index] = reaction.with_user(user_id)
                break
        else:
            updated.append(Reaction(type=reaction_type, users=(user_id,)))

    return tuple(r for r in updated if r.users), previous_type


def reaction_of(
    reactions: Sequence[Reaction], user_id: UserId
) -> ReactionType | None:
    """Return the reaction type a user currently holds, if any."""
    for reaction in reactions:
        if user_id in reaction.users:
            return reaction.type
    return None

"""Domain value objects for the humor network.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from humor.domain.value.common import RootValueObject


class ReactionType(str, Enum):
    """Reaction a user can attach to a post or a comment."""

    AMUSED = "Amused"
    CLEVER = "Clever"
    WOW = "...Wow"


class NotificationType(str, Enum):
    """Kind of action a notification reports to a post author."""

    REACTION = "reaction"
    COMMENT = "comment"
    REPLY = "reply"


class HumorTag(str, Enum):
    """Self-declared humor style shown on a profile."""

    SARCASTIC = "Sarcastic"
    DARK = "Dark"
    WHOLESOME = "Wholesome"
    DRY = "Dry"
    GEN_Z = "Gen Z"
    SAVAGE = "Savage"
    PUNNY = "Punny"


class Handle(RootValueObject[str]):
    """Public user name.

    Display case is preserved; uniqueness and lookups use ``normalized``.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Trim and validate handle length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Handle must be 1-50 characters")
        return v

    @property
    def normalized(self) -> str:
        """Case-folded form used for uniqueness."""
        return self.root.casefold()

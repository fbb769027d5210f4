"""User aggregate root.

Users sign up with a handle and password and pick a humor style.
"""

from datetime import UTC, datetime

from pydantic import Field

from humor.domain.model.common import DomainModel
from humor.domain.value import HumorTag, UserId
from humor.domain.value.types import Handle


class User(DomainModel):
    """User aggregate root.

    The handle is unique ignoring case. ``password_hash`` never leaves the
    domain and persistence layers.
    """

    id: UserId
    handle: Handle
    password_hash: str = Field(repr=False)
    humor_tag: HumorTag
    bio: str = Field(default="This user is too mysterious for a bio.", max_length=500)
    profile_pic_url: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

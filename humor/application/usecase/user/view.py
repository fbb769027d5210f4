"""Public user representation."""

from datetime import datetime

from pydantic import BaseModel

from humor.domain.model import User


class UserView(BaseModel):
    """User profile as shown to clients. Never includes the password hash."""

    id: str
    handle: str
    bio: str
    profile_pic_url: str
    humor_tag: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            handle=user.handle.root,
            bio=user.bio,
            profile_pic_url=user.profile_pic_url,
            humor_tag=user.humor_tag.value,
            created_at=user.created_at,
        )

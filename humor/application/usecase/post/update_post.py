"""Update post use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.post.view import PostView, PostViewBuilder
from humor.domain.service import PostService, UserService
from humor.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their current value.
    """

    post_id: str
    user_id: str  # Current user ID (must be author)
    text: str | None = None
    category: str | None = None
    is_anonymous: bool | None = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for an author editing their post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Apply the edit.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
            ValidationError: If text or category would become blank
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        user_id = UserId(parse_id(request.user_id, "User"))

        current = await self.post_service.require_post(post_id)
        post = await self.post_service.update_post(
            post_id=post_id,
            user_id=user_id,
            text=request.text if request.text is not None else current.text,
            category=request.category
            if request.category is not None
            else current.category,
            is_anonymous=request.is_anonymous
            if request.is_anonymous is not None
            else current.is_anonymous,
        )
        return await PostViewBuilder(self.user_service).build(post)

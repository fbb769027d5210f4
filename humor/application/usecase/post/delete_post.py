"""Delete post use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.domain.service import PostService
from humor.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    message: str = "Post removed"


class DeletePostUseCase(BaseUseCase):
    """Use case for an author deleting their post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete the post.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        user_id = UserId(parse_id(request.user_id, "User"))
        await self.post_service.delete_post(post_id, user_id)
        return DeletePostResponse(post_id=str(post_id))

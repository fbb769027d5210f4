"""Get post use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.post.view import PostView, PostViewBuilder
from humor.domain.service import PostService, UserService
from humor.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for reading one post with its thread."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Return the post.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        post = await self.post_service.require_post(post_id)
        return await PostViewBuilder(self.user_service).build(post)

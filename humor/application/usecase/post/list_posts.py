"""List posts use case."""

from pydantic import BaseModel, Field

from humor.application.usecase.base import BaseUseCase
from humor.application.usecase.post.view import PostView, PostViewBuilder
from humor.domain.service import PostService, UserService


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: int | None = Field(default=None, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase):
    """Use case for the post feed, newest first."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts = await self.post_service.list_posts(
            limit=request.limit, offset=request.offset
        )
        views = await PostViewBuilder(self.user_service).build_many(posts)
        return ListPostsResponse(posts=views)

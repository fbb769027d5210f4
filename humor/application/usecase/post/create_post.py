"""Create post use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.post.view import PostView, PostViewBuilder
from humor.domain.service import PostService, UserService
from humor.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    text: str
    category: str
    is_anonymous: bool = False


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Create the post and return its view.

        Raises:
            ValidationError: If text or category is missing
            NotFoundError: If the author doesn't exist
        """
        author_id = UserId(parse_id(request.author_id, "User"))
        await self.user_service.get_by_id(author_id)

        post = await self.post_service.create_post(
            author_id=author_id,
            text=request.text,
            category=request.category,
            is_anonymous=request.is_anonymous,
        )
        return await PostViewBuilder(self.user_service).build(post)

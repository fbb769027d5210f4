"""Create comment use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.post.view import PostView, PostViewBuilder
from humor.domain.service import CommentService, UserService
from humor.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    text: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post: PostView


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to any comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Add the comment and return the updated post.

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the post or parent comment doesn't exist
        """
        parent_id = (
            CommentId(parse_id(request.parent_id, "Parent comment"))
            if request.parent_id
            else None
        )
        outcome = await self.comment_service.add_comment(
            post_id=PostId(parse_id(request.post_id, "Post")),
            author_id=UserId(parse_id(request.author_id, "User")),
            text=request.text,
            parent_id=parent_id,
        )
        view = await PostViewBuilder(self.user_service).build(outcome.post)
        return CreateCommentResponse(comment_id=str(outcome.comment.id), post=view)

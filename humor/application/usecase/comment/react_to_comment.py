"""React to comment use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.post.view import PostView, PostViewBuilder
from humor.domain.service import ReactionService, UserService
from humor.domain.value import CommentId, PostId, UserId


class ReactToCommentRequest(BaseModel):
    """React to comment request."""

    post_id: str
    comment_id: str
    user_id: str
    reaction_type: str


class ReactToCommentResponse(BaseModel):
    """React to comment response."""

    post: PostView
    reaction: str | None


class ReactToCommentUseCase(BaseUseCase):
    """Use case for reacting to a comment at any depth."""

    def __init__(
        self, reaction_service: ReactionService, user_service: UserService
    ) -> None:
        self.reaction_service = reaction_service
        self.user_service = user_service

    async def execute(self, request: ReactToCommentRequest) -> ReactToCommentResponse:
        outcome = await self.reaction_service.react_to_comment(
            post_id=PostId(parse_id(request.post_id, "Post")),
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            user_id=UserId(parse_id(request.user_id, "User")),
            reaction_type=request.reaction_type,
        )
        view = await PostViewBuilder(self.user_service).build(outcome.post)
        return ReactToCommentResponse(
            post=view,
            reaction=outcome.current_type.value if outcome.current_type else None,
        )

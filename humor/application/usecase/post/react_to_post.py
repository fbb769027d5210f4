"""React to post use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.post.view import PostView, PostViewBuilder
from humor.domain.service import ReactionService, UserService
from humor.domain.value import PostId, UserId


class ReactToPostRequest(BaseModel):
    """React to post request."""

    post_id: str
    user_id: str  # User ID from authenticated user
    reaction_type: str


class ReactToPostResponse(BaseModel):
    """React to post response."""

    post: PostView
    reaction: str | None  # Reaction the user holds now, None after a toggle-off


class ReactToPostUseCase(BaseUseCase):
    """Use case for adding, switching or removing a post reaction."""

    def __init__(
        self, reaction_service: ReactionService, user_service: UserService
    ) -> None:
        """Initialize react to post use case.

        Args:
            reaction_service: Reaction domain service
            user_service: User domain service
        """
        self.reaction_service = reaction_service
        self.user_service = user_service

    async def execute(self, request: ReactToPostRequest) -> ReactToPostResponse:
        """Apply the reaction.

        Raises:
            ValidationError: If the reaction type is unknown
            NotFoundError: If the post doesn't exist
        """
        outcome = await self.reaction_service.react_to_post(
            post_id=PostId(parse_id(request.post_id, "Post")),
            user_id=UserId(parse_id(request.user_id, "User")),
            reaction_type=request.reaction_type,
        )
        view = await PostViewBuilder(self.user_service).build(outcome.post)
        return ReactToPostResponse(
            post=view,
            reaction=outcome.current_type.value if outcome.current_type else None,
        )

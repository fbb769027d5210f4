"""Login use case."""

from pydantic import BaseModel

from humor.application.usecase.auth.signup import AuthResponse, parse_handle
from humor.application.usecase.base import BaseUseCase
from humor.application.usecase.user.view import UserView
from humor.domain.error import AuthenticationError, ValidationError
from humor.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    handle: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Check credentials and issue a token.

        Raises:
            AuthenticationError: If the handle or password is wrong
        """
        try:
            handle = parse_handle(request.handle)
        except ValidationError:
            raise AuthenticationError()

        user = await self.user_service.authenticate(handle, request.password)
        token = self.jwt_service.create_token(str(user.id), user.handle.root)
        return AuthResponse(token=token, user=UserView.from_user(user))

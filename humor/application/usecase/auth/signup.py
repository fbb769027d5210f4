"""Signup use case."""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from humor.application.usecase.base import BaseUseCase
from humor.application.usecase.user.view import UserView
from humor.domain.error import ValidationError
from humor.domain.service import JWTService, UserService
from humor.domain.value import HumorTag
from humor.domain.value.types import Handle


class SignupRequest(BaseModel):
    """Signup request."""

    handle: str
    password: str
    humor_tag: str


class AuthResponse(BaseModel):
    """Token and profile returned after signup or login."""

    token: str
    user: UserView


def parse_handle(value: str) -> Handle:
    """Parse a handle from user input.

    Raises:
        ValidationError: If the handle is blank or too long
    """
    try:
        return Handle(value)
    except PydanticValidationError:
        raise ValidationError("Handle must be 1-50 characters")


class SignupUseCase(BaseUseCase):
    """Use case for creating an account and logging it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Register the user and issue a token.

        Raises:
            ValidationError: If a field is missing or invalid
            BusinessRuleViolationError: If the handle is taken
        """
        if not request.password:
            raise ValidationError("Please provide handle, password and humor tag")
        try:
            humor_tag = HumorTag(request.humor_tag)
        except ValueError:
            allowed = ", ".join(t.value for t in HumorTag)
            raise ValidationError(f"Invalid humor tag (expected one of {allowed})")

        user = await self.user_service.register(
            handle=parse_handle(request.handle),
            password=request.password,
            humor_tag=humor_tag,
        )
        token = self.jwt_service.create_token(str(user.id), user.handle.root)
        return AuthResponse(token=token, user=UserView.from_user(user))

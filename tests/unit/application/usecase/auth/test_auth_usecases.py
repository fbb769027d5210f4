"""Unit tests for signup and login."""

import pytest

from humor.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from humor.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)
from humor.domain.service import JWTService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignup:
    """Tests for SignupUseCase."""

    @pytest.mark.asyncio
    async def test_signup_returns_token_for_new_user(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)
        jwt_service = await unit_env.get(JWTService)

        response = await use_case.execute(
            SignupRequest(handle="Punslinger", password="pw", humor_tag="Punny")
        )

        assert response.user.handle == "Punslinger"
        assert response.user.humor_tag == "Punny"
        assert jwt_service.get_user_id_from_token(response.token) == response.user.id

    @pytest.mark.asyncio
    async def test_invalid_humor_tag(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                SignupRequest(handle="x", password="pw", humor_tag="Boring")
            )

    @pytest.mark.asyncio
    async def test_blank_handle(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                SignupRequest(handle="   ", password="pw", humor_tag="Dry")
            )

    @pytest.mark.asyncio
    async def test_duplicate_handle_any_case(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)
        await use_case.execute(SignupRequest(handle="Dry", password="pw", humor_tag="Dry"))

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(
                SignupRequest(handle="dRY", password="pw", humor_tag="Dry")
            )


class TestLogin:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_correct_password(self, unit_env):
        signup = await unit_env.get(SignupUseCase)
        login = await unit_env.get(LoginUseCase)
        created = await signup.execute(
            SignupRequest(handle="wit", password="s3cret", humor_tag="Dark")
        )

        response = await login.execute(LoginRequest(handle="WIT", password="s3cret"))

        assert response.user.id == created.user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("handle,password", [("wit", "wrong"), ("", "s3cret")])
    async def test_bad_credentials(self, unit_env, handle, password):
        signup = await unit_env.get(SignupUseCase)
        login = await unit_env.get(LoginUseCase)
        await signup.execute(
            SignupRequest(handle="wit", password="s3cret", humor_tag="Dark")
        )

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(handle=handle, password=password))

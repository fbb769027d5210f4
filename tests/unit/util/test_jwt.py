"""Unit tests for JWT and password utilities."""

from uuid import uuid4

import pytest

from humor.config import AuthSettings
from humor.util.jwt import JWTError, bearer_token, create_token, verify_token
from humor.util.password import hash_password, verify_password


class TestTokens:
    """Tests for token creation and verification."""

    def test_round_trip(self):
        settings = AuthSettings(jwt_secret="test-secret")
        user_id = str(uuid4())

        payload = verify_token(create_token(user_id, "alice", settings), settings)

        assert payload.user_id == user_id
        assert payload.handle == "alice"

    def test_wrong_secret_rejected(self):
        token = create_token("u", "alice", AuthSettings(jwt_secret="one"))

        with pytest.raises(JWTError):
            verify_token(token, AuthSettings(jwt_secret="two"))

    def test_expired_rejected(self):
        settings = AuthSettings(jwt_secret="s", jwt_expiry_days=-1)

        with pytest.raises(JWTError, match="expired"):
            verify_token(create_token("u", "alice", settings), settings)


@pytest.mark.parametrize(
    "header,expected",
    [
        ("Bearer abc", "abc"),
        ("bearer abc", "abc"),
        ("Basic abc", None),
        ("Bearer ", None),
        (None, None),
    ],
)
def test_bearer_token(header, expected):
    assert bearer_token(header) == expected


def test_password_hash_verifies():
    hashed = hash_password("hunter2")

    assert verify_password("hunter2", hashed)
    assert not verify_password("hunter3", hashed)
    assert not verify_password("hunter2", "not-a-hash")

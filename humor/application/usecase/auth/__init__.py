"""Authentication use cases."""

from .login import LoginRequest, LoginUseCase
from .signup import AuthResponse, SignupRequest, SignupUseCase

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "LoginUseCase",
    "SignupRequest",
    "SignupUseCase",
]

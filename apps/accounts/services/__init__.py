from .auth_service import AccountService, AuthService, PasswordService
from .token_service import TokenService

__all__ = [
    "AuthService",
    "AccountService",
    "PasswordService",
    "TokenService",
]

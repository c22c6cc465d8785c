from .admin_serializer import (
    AdminUserUpdateSerializer,
    UserDetailResponseSerializer,
    UserListResponseSerializer,
)
from .password_serializer import ForgotPasswordSerializer, ResetPasswordSerializer
from .user_serializer import (
    AuthResponseSerializer,
    LoginRequestSerializer,
    PasswordUpdateSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    UserSerializer,
)

__all__ = [
    "UserSerializer",
    "RegisterSerializer",
    "LoginRequestSerializer",
    "AuthResponseSerializer",
    "ProfileUpdateSerializer",
    "PasswordUpdateSerializer",
    "ForgotPasswordSerializer",
    "ResetPasswordSerializer",
    "AdminUserUpdateSerializer",
    "UserListResponseSerializer",
    "UserDetailResponseSerializer",
]

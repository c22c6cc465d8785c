"""계정 관련 유틸리티"""

from .email import build_password_reset_url, send_password_reset_email

__all__ = [
    "build_password_reset_url",
    "send_password_reset_email",
]

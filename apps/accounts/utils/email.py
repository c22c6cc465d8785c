"""이메일 전송 유틸리티"""

from django.conf import settings
from django.core.mail import send_mail


def _send_template_email(user_email: str, subject: str, message: str) -> None:
    """공통 이메일 전송 함수

    Args:
        user_email: 수신자 이메일
        subject: 이메일 제목
        message: 이메일 본문

    Raises:
        전송 실패 시 메일 백엔드 예외 (fail_silently=False)
    """
    send_mail(
        subject=subject,
        message=message,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user_email],
        fail_silently=False,
    )


def build_password_reset_url(token: str) -> str:
    return f"{settings.FRONTEND_URL}/password/reset/{token}"


def send_password_reset_email(user_email: str, token: str) -> None:
    """비밀번호 재설정 이메일 발송 (원본 토큰이 담긴 링크)"""
    reset_url = build_password_reset_url(token)

    subject = "ShopIT Password Recovery"
    message = (
        f"Your password reset token is as follow:\n\n{reset_url}\n\n"
        f"This link expires in {settings.RESET_PASSWORD_TOKEN_EXPIRE_MINUTES} minutes.\n"
        "If you have not requested this email, then ignore it."
    )

    _send_template_email(user_email, subject, message)

"""비밀번호 재설정 시리얼라이저"""

from rest_framework import serializers

from .user_serializer import PASSWORD_ERRORS


class ForgotPasswordSerializer(serializers.Serializer):
    """비밀번호 재설정 요청

    형식 검증 없이 조회만 한다. 찾을 수 없는 주소는 서비스에서 404.
    """

    email = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=True, help_text="가입된 이메일 주소"
    )


class ResetPasswordSerializer(serializers.Serializer):
    """비밀번호 재설정 확인

    두 값의 일치 여부는 토큰 검증 이후 서비스에서 확인한다.
    """

    password = serializers.CharField(
        write_only=True, min_length=6, error_messages=PASSWORD_ERRORS, help_text="새 비밀번호"
    )
    confirmPassword = serializers.CharField(  # noqa: N815
        write_only=True,
        error_messages={"required": "Please confirm your password"},
        help_text="비밀번호 확인",
    )

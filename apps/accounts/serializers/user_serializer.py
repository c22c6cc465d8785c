from rest_framework import serializers

from apps.accounts.models import User

NAME_ERRORS = {
    "required": "Please enter your name",
    "blank": "Please enter your name",
    "max_length": "Your name cannot exceed 30 characters",
}
EMAIL_ERRORS = {
    "required": "Please enter your email",
    "blank": "Please enter your email",
    "invalid": "Please enter valid email address",
}
PASSWORD_ERRORS = {
    "required": "Please enter your password",
    "blank": "Please enter your password",
    "min_length": "Your password must be longer than 6 characters",
}


class AvatarSerializer(serializers.Serializer):
    """아바타 (저장소 키 + URL)"""

    public_id = serializers.CharField(source="avatar_public_id", read_only=True)
    url = serializers.CharField(source="avatar_url", read_only=True)


class UserSerializer(serializers.ModelSerializer):
    """사용자 정보 조회용 Serializer (비밀번호/재설정 토큰 제외)"""

    avatar = AvatarSerializer(source="*", read_only=True)

    class Meta:
        model = User
        fields = (
            "id",
            "name",
            "email",
            "role",
            "avatar",
            "created_at",
        )
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """회원가입 요청

    이메일 중복은 사전 검사하지 않고 DB unique 제약으로 처리한다.
    """

    name = serializers.CharField(max_length=30, error_messages=NAME_ERRORS)
    email = serializers.EmailField(error_messages=EMAIL_ERRORS)
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        style={"input_type": "password"},
        error_messages=PASSWORD_ERRORS,
        help_text="비밀번호 (최소 6자)",
    )


class LoginRequestSerializer(serializers.Serializer):
    """로그인 요청"""

    email = serializers.EmailField(help_text="이메일 주소")
    password = serializers.CharField(write_only=True, help_text="비밀번호")


class AuthResponseSerializer(serializers.Serializer):
    """토큰 발급 응답 (회원가입/로그인/비밀번호 변경)"""

    success = serializers.BooleanField()
    token = serializers.CharField()
    user = UserSerializer()


class ProfileUpdateSerializer(serializers.Serializer):
    """프로필 수정 (name, email만 허용)"""

    name = serializers.CharField(max_length=30, required=False, error_messages=NAME_ERRORS)
    email = serializers.EmailField(required=False, error_messages=EMAIL_ERRORS)


class PasswordUpdateSerializer(serializers.Serializer):
    """비밀번호 변경"""

    oldPassword = serializers.CharField(  # noqa: N815
        write_only=True, error_messages={"required": "Please enter your old password"}
    )
    password = serializers.CharField(
        write_only=True, min_length=6, error_messages=PASSWORD_ERRORS, help_text="새 비밀번호"
    )

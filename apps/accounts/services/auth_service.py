"""계정 관련 서비스"""

import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from rest_framework.exceptions import APIException

from apps.accounts.models import User
from apps.accounts.utils import send_password_reset_email
from apps.core.exceptions import Internal, InvalidInput, NotFound, Unauthorized
from apps.core.S3.avatar_storage import avatar_storage

logger = logging.getLogger(__name__)

# 계정 존재 여부를 노출하지 않도록 이메일/비밀번호 오류 메시지를 통일
INVALID_CREDENTIALS_MESSAGE = "Invalid Email or password"
# 잘못된 토큰과 만료된 토큰을 구분하지 않음
INVALID_RESET_TOKEN_MESSAGE = "Password reset token is invalid or has been expired"
DUPLICATE_EMAIL_MESSAGE = "Duplicate email entered"

RESET_FIELDS = ["reset_password_token", "reset_password_expire"]


def _user_pk(user_id) -> int:
    """URL 경로의 id를 pk로 변환 (숫자가 아니면 NotFound)"""
    try:
        return int(user_id)
    except (TypeError, ValueError):
        raise NotFound(f"User not found with id: {user_id}") from None


def get_user_or_404(user_id) -> User:
    try:
        return User.objects.get(pk=_user_pk(user_id))
    except User.DoesNotExist:
        raise NotFound(f"User not found with id: {user_id}") from None


def _update_user_fields(user_id, changes: dict) -> None:
    """허용된 필드만 갱신 (None 값은 변경하지 않음)"""
    changes = {field: value for field, value in changes.items() if value is not None}
    if "email" in changes:
        changes["email"] = User.objects.normalize_email(changes["email"])

    if not changes:
        get_user_or_404(user_id)
        return

    try:
        with transaction.atomic():
            updated = User.objects.filter(pk=_user_pk(user_id)).update(**changes)
    except IntegrityError as e:
        raise InvalidInput(DUPLICATE_EMAIL_MESSAGE) from e

    if not updated:
        raise NotFound(f"User not found with id: {user_id}")


class AuthService:
    """회원가입/로그인 비즈니스 로직"""

    @staticmethod
    def register(name: str, email: str, password: str) -> User:
        """유저 생성 (기본 아바타, 비밀번호 해시)

        이메일 중복은 사전 검사 없이 DB unique 제약 위반으로 감지한다.
        """
        try:
            with transaction.atomic():
                user = User.objects.create_user(email=email, name=name, password=password)
        except IntegrityError as e:
            raise InvalidInput(DUPLICATE_EMAIL_MESSAGE) from e

        logger.info("User registered: id=%s", user.pk)
        return user

    @staticmethod
    def login(email: str, password: str) -> User:
        """이메일/비밀번호 확인

        Raises:
            InvalidInput: 이메일 또는 비밀번호 누락
            Unauthorized: 이메일 없음 또는 비밀번호 불일치 (동일 메시지)
        """
        if not email or not password:
            raise InvalidInput("Please provide email and password")

        user = User.objects.get_by_email(email)

        if user is None:
            # 존재하지 않는 이메일도 해시 비용을 동일하게 소모 (타이밍 공격 방지)
            User().set_password(password)
            logger.warning("Failed login attempt: unknown email")
            raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)

        if not user.check_password(password):
            logger.warning("Failed login attempt: user id=%s", user.pk)
            raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)

        User.objects.filter(pk=user.pk).update(last_login=timezone.now())
        return user


class PasswordService:
    """비밀번호 재설정/변경 비즈니스 로직"""

    @staticmethod
    def forgot_password(email: str) -> str:
        """재설정 토큰 발급 및 이메일 전송

        DB에는 토큰 해시와 만료 시간만 저장하고, 원본 토큰은 이메일 링크로만 전달한다.
        전송 실패 시 두 필드를 비우고 Internal 에러를 발생시킨다.

        Returns:
            이메일이 전송된 주소
        """
        user = User.objects.get_by_email(email)
        if user is None:
            raise NotFound("User not found with this email")

        raw_token = user.get_reset_password_token()
        user.save(update_fields=RESET_FIELDS)
        logger.info("Password reset token issued: user id=%s", user.pk)

        try:
            send_password_reset_email(user.email, raw_token)
        except Exception as e:
            logger.error("Password reset email failed: user id=%s", user.pk, exc_info=True)
            user.clear_reset_password_token()
            try:
                user.save(update_fields=RESET_FIELDS)
            except DatabaseError:
                # 원본 토큰은 전달되지 않았으므로 남은 해시는 사용될 수 없고 만료로 정리됨
                logger.exception("Reset token rollback failed: user id=%s", user.pk)
            raise Internal(str(e) or Internal.default_detail) from e

        return user.email

    @staticmethod
    def reset_password(raw_token: str, password: str, confirm_password: str) -> User:
        """원본 토큰으로 비밀번호 재설정 (1회용)"""
        user = User.objects.with_valid_reset_token(raw_token).first()
        if user is None:
            raise InvalidInput(INVALID_RESET_TOKEN_MESSAGE)

        if password != confirm_password:
            raise InvalidInput("Password does not match")

        user.set_password(password)
        user.clear_reset_password_token()
        user.save(update_fields=["password", *RESET_FIELDS])
        logger.info("Password reset completed: user id=%s", user.pk)
        return user

    @staticmethod
    def update_password(user_id, old_password: str, new_password: str) -> User:
        """현재 비밀번호 확인 후 변경"""
        user = get_user_or_404(user_id)

        if not user.check_password(old_password):
            raise InvalidInput("Old password is incorrect")

        user.set_password(new_password)
        user.save(update_fields=["password"])
        return user


class AccountService:
    """프로필 및 관리자 유저 관리 비즈니스 로직"""

    @staticmethod
    def get_profile(user_id) -> User:
        return get_user_or_404(user_id)

    @staticmethod
    def update_profile(user_id, name: str | None = None, email: str | None = None) -> None:
        """name, email만 변경 (아바타 변경은 지원하지 않음)"""
        _update_user_fields(user_id, {"name": name, "email": email})

    @staticmethod
    def list_users():
        return User.objects.all()

    @staticmethod
    def get_user(user_id) -> User:
        return get_user_or_404(user_id)

    @staticmethod
    def update_user(
        user_id, name: str | None = None, email: str | None = None, role: str | None = None
    ) -> None:
        """관리자 수정 - name, email, role만 변경"""
        if role is not None and role not in User.Role.values:
            raise InvalidInput(f"Invalid role: {role}")
        _update_user_fields(user_id, {"name": name, "email": email, "role": role})

    @staticmethod
    def delete_user(user_id) -> None:
        """유저 삭제 + 기본 아바타가 아니면 저장소의 아바타도 삭제"""
        user = get_user_or_404(user_id)

        if not user.has_default_avatar:
            try:
                avatar_storage.delete(user.avatar_public_id)
            except APIException:
                # 아바타 삭제 실패가 유저 삭제를 막지 않음
                logger.warning(
                    "Avatar %s for user id=%s could not be deleted", user.avatar_public_id, user.pk
                )

        user.delete()
        logger.info("User deleted: id=%s", user_id)

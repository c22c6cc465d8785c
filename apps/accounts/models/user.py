import hashlib
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils import timezone


def hash_reset_token(raw_token: str) -> str:
    """재설정 토큰 단방향 해시 (SHA-256 hex)"""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


class UserManager(BaseUserManager):
    """커스텀 유저 매니저"""

    def create_user(self, email, name, password=None, **extra_fields):
        """일반 유저 생성 (기본 아바타 지정)"""
        if not email:
            raise ValueError("Please enter your email")
        if not name:
            raise ValueError("Please enter your name")

        email = self.normalize_email(email)
        extra_fields.setdefault("avatar_public_id", settings.DEFAULT_AVATAR_PUBLIC_ID)
        extra_fields.setdefault("avatar_url", settings.DEFAULT_AVATAR_URL)

        user = self.model(email=email, name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        """관리자 유저 생성"""
        extra_fields.setdefault("role", User.Role.ADMIN)
        return self.create_user(email, name, password, **extra_fields)

    def get_by_email(self, email):
        """저장 시와 같은 방식으로 정규화한 이메일로 조회 (없으면 None)"""
        return self.filter(email=self.normalize_email(email)).first()

    def with_valid_reset_token(self, raw_token):
        """해시가 일치하고 만료되지 않은 재설정 토큰을 가진 유저"""
        return self.filter(
            reset_password_token=hash_reset_token(raw_token),
            reset_password_expire__gt=timezone.now(),
        )

    def expired_reset_tokens(self):
        return self.filter(reset_password_expire__lte=timezone.now())

    def clear_expired_reset_tokens(self):
        """만료된 재설정 토큰 정리 (토큰/만료시간 동시 초기화)"""
        return self.expired_reset_tokens().update(
            reset_password_token=None, reset_password_expire=None
        )


class User(AbstractBaseUser):
    """커스텀 유저 모델 - 이메일 로그인 + 역할 기반 권한

    Note:
    - password 필드는 AbstractBaseUser에 포함 (해시만 저장)
    - reset_password_token에는 원본 토큰이 아닌 해시만 저장
    - reset_password_token / reset_password_expire는 항상 함께 설정되거나 함께 비워짐
    """

    class Role(models.TextChoices):
        USER = "user", "User"
        ADMIN = "admin", "Admin"

    name = models.CharField(max_length=30, help_text="표시 이름")
    email = models.EmailField(
        unique=True,
        db_index=True,
        help_text="이메일 주소 (로그인 ID)",
    )
    role = models.CharField(
        max_length=10, choices=Role.choices, default=Role.USER, help_text="권한 역할"
    )
    avatar_public_id = models.CharField(max_length=255, help_text="아바타 저장소 키")
    avatar_url = models.URLField(max_length=500, help_text="아바타 URL")

    # 비밀번호 재설정
    reset_password_token = models.CharField(
        max_length=64, null=True, blank=True, db_index=True, help_text="재설정 토큰 해시"
    )
    reset_password_expire = models.DateTimeField(
        null=True, blank=True, help_text="재설정 토큰 만료 시간"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"
        verbose_name = "사용자"
        verbose_name_plural = "사용자"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.email})"

    @property
    def is_admin(self):
        return self.role == self.Role.ADMIN

    @property
    def has_default_avatar(self):
        return self.avatar_public_id == settings.DEFAULT_AVATAR_PUBLIC_ID

    def get_reset_password_token(self):
        """재설정 토큰 생성

        해시와 만료 시간만 모델에 기록하고 원본 토큰을 반환한다. 저장은 호출자 책임.

        Returns:
            이메일로 전달할 원본 토큰
        """
        raw_token = secrets.token_hex(20)
        self.reset_password_token = hash_reset_token(raw_token)
        self.reset_password_expire = timezone.now() + timedelta(
            minutes=settings.RESET_PASSWORD_TOKEN_EXPIRE_MINUTES
        )
        return raw_token

    def clear_reset_password_token(self):
        self.reset_password_token = None
        self.reset_password_expire = None

"""세션 토큰 (JWT) 발급/검증 서비스"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from django.conf import settings

import jwt
from rest_framework import status
from rest_framework.response import Response

from apps.accounts.models import User
from apps.accounts.serializers import UserSerializer


class TokenService:
    """JWT 발급 및 검증 (사용하는 곳에서 인스턴스화)"""

    def __init__(
        self,
        *,
        secret_key: str | None = None,
        algorithm: str | None = None,
        expires_minutes: int | None = None,
    ) -> None:
        self._secret_key = secret_key if secret_key is not None else settings.JWT_SECRET_KEY
        self._algorithm = algorithm if algorithm is not None else settings.JWT_ALGORITHM
        self._expires_minutes = (
            expires_minutes if expires_minutes is not None else settings.JWT_EXPIRES_MINUTES
        )

    def generate_token(self, user: User) -> str:
        """유저 id를 담은 서명 토큰 생성"""
        now = datetime.now(UTC)
        payload = {
            "id": user.pk,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=int(self._expires_minutes))).timestamp()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> dict[str, Any] | None:
        """토큰 검증 및 디코드 (만료/위조 시 None)"""
        try:
            return jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except jwt.InvalidTokenError:
            return None

    def get_user_from_token(self, token: str) -> User | None:
        payload = self.decode_token(token)
        if not payload or "id" not in payload:
            return None

        try:
            return User.objects.get(pk=payload["id"])
        except User.DoesNotExist:
            return None

    def send_token(self, user: User, status_code: int = status.HTTP_200_OK) -> Response:
        """토큰 발급 응답 - 본문과 HTTP-only 쿠키 양쪽으로 전달"""
        token = self.generate_token(user)
        response = Response(
            {"success": True, "token": token, "user": UserSerializer(user).data},
            status=status_code,
        )
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            token,
            max_age=settings.COOKIE_EXPIRES_DAYS * 24 * 60 * 60,
            httponly=True,
            secure=settings.AUTH_COOKIE_SECURE,
            samesite="Lax",
        )
        return response

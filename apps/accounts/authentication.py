"""
JWT 인증 백엔드 (DRF)

Authorization: Bearer <token> 헤더 또는 HTTP-only 쿠키의 토큰으로 인증한다.
"""

from django.conf import settings

from rest_framework import authentication

from apps.accounts.services.token_service import TokenService
from apps.core.exceptions import Unauthorized


class JWTAuthentication(authentication.BaseAuthentication):
    """JWT 토큰 인증 백엔드"""

    keyword = "Bearer"

    def authenticate(self, request):
        """
        Returns:
            인증 성공 시 (user, token), 토큰이 없으면 None

        Raises:
            Unauthorized: 토큰이 위조/만료되었거나 유저가 삭제됨
        """
        token = self._get_header_token(request) or request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not token:
            return None
        return self.authenticate_credentials(token)

    def _get_header_token(self, request):
        auth_parts = request.META.get("HTTP_AUTHORIZATION", "").split()
        if len(auth_parts) != 2 or auth_parts[0] != self.keyword:
            return None
        return auth_parts[1]

    def authenticate_credentials(self, token):
        user = TokenService().get_user_from_token(token)
        if user is None:
            raise Unauthorized("Login first to access this resource")
        return (user, token)

    def authenticate_header(self, request):
        return self.keyword

"""비밀번호 재설정 뷰"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.serializers import (
    AuthResponseSerializer,
    ForgotPasswordSerializer,
    ResetPasswordSerializer,
)
from apps.accounts.services import PasswordService, TokenService

from .user_views import MessageResponseSerializer


class ForgotPasswordView(APIView):
    """비밀번호 재설정 요청 (이메일 전송)"""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=ForgotPasswordSerializer,
        responses={200: MessageResponseSerializer},
        tags=["비밀번호"],
    )
    def post(self, request):
        serializer = ForgotPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sent_to = PasswordService.forgot_password(serializer.validated_data.get("email", ""))
        return Response(
            {"success": True, "message": f"Email sent to: {sent_to}"},
            status=status.HTTP_200_OK,
        )


class ResetPasswordView(APIView):
    """비밀번호 재설정 확인 - 성공 시 토큰 발급"""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=ResetPasswordSerializer,
        responses={200: AuthResponseSerializer},
        tags=["비밀번호"],
    )
    def put(self, request, token):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = PasswordService.reset_password(
            token,
            serializer.validated_data["password"],
            serializer.validated_data["confirmPassword"],
        )
        return TokenService().send_token(user)

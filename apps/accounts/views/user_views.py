from django.conf import settings
from django.utils import timezone

from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.serializers import (
    AuthResponseSerializer,
    LoginRequestSerializer,
    PasswordUpdateSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    UserDetailResponseSerializer,
    UserSerializer,
)
from apps.accounts.services import AccountService, AuthService, PasswordService, TokenService

SuccessResponseSerializer = inline_serializer(
    name="SuccessResponse", fields={"success": serializers.BooleanField()}
)
MessageResponseSerializer = inline_serializer(
    name="MessageResponse",
    fields={"success": serializers.BooleanField(), "message": serializers.CharField()},
)


class RegisterView(APIView):
    """회원가입 - 가입 즉시 토큰 발급"""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=RegisterSerializer,
        responses={200: AuthResponseSerializer},
        tags=["인증"],
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AuthService.register(**serializer.validated_data)
        return TokenService().send_token(user, status.HTTP_200_OK)


class LoginView(APIView):
    """로그인"""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=LoginRequestSerializer,
        responses={200: AuthResponseSerializer},
        tags=["인증"],
    )
    def post(self, request):
        email = str(request.data.get("email") or "").strip()
        password = request.data.get("password") or ""

        user = AuthService.login(email, password)
        return TokenService().send_token(user)


class LogoutView(APIView):
    """로그아웃 - 토큰 쿠키 만료"""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(responses={200: MessageResponseSerializer}, tags=["인증"])
    def get(self, request):
        response = Response(
            {"success": True, "message": "Logout Successful"}, status=status.HTTP_200_OK
        )
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            "",
            expires=timezone.now(),
            httponly=True,
            secure=settings.AUTH_COOKIE_SECURE,
            samesite="Lax",
        )
        return response


@extend_schema(tags=["프로필"])
class CurrentUserView(APIView):
    """현재 로그인한 유저 정보"""

    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserDetailResponseSerializer})
    def get(self, request):
        user = AccountService.get_profile(request.user.pk)
        response = Response({"success": True, "user": UserSerializer(user).data})
        response["Cache-Control"] = "private, no-store"
        return response


@extend_schema(tags=["프로필"])
class ProfileUpdateView(APIView):
    """프로필 수정 (name, email)"""

    permission_classes = [IsAuthenticated]

    @extend_schema(request=ProfileUpdateSerializer, responses={200: SuccessResponseSerializer})
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        AccountService.update_profile(request.user.pk, **serializer.validated_data)
        return Response({"success": True}, status=status.HTTP_200_OK)


@extend_schema(tags=["비밀번호"])
class PasswordUpdateView(APIView):
    """비밀번호 변경 - 새 토큰 발급"""

    permission_classes = [IsAuthenticated]

    @extend_schema(request=PasswordUpdateSerializer, responses={200: AuthResponseSerializer})
    def put(self, request):
        serializer = PasswordUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = PasswordService.update_password(
            request.user.pk,
            serializer.validated_data["oldPassword"],
            serializer.validated_data["password"],
        )
        return TokenService().send_token(user)

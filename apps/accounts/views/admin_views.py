"""관리자 유저 관리 뷰"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.permissions import IsAdminRole
from apps.accounts.serializers import (
    AdminUserUpdateSerializer,
    UserDetailResponseSerializer,
    UserListResponseSerializer,
    UserSerializer,
)
from apps.accounts.services import AccountService

from .user_views import SuccessResponseSerializer


@extend_schema(tags=["관리자"])
class AdminUserListView(APIView):
    """전체 유저 목록"""

    permission_classes = [IsAuthenticated, IsAdminRole]

    @extend_schema(responses={200: UserListResponseSerializer})
    def get(self, request):
        users = AccountService.list_users()
        return Response({"success": True, "users": UserSerializer(users, many=True).data})


@extend_schema(tags=["관리자"])
class AdminUserDetailView(APIView):
    """유저 조회/수정/삭제"""

    permission_classes = [IsAuthenticated, IsAdminRole]

    @extend_schema(responses={200: UserDetailResponseSerializer})
    def get(self, request, user_id):
        user = AccountService.get_user(user_id)
        return Response({"success": True, "user": UserSerializer(user).data})

    @extend_schema(request=AdminUserUpdateSerializer, responses={200: SuccessResponseSerializer})
    def put(self, request, user_id):
        serializer = AdminUserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        AccountService.update_user(user_id, **serializer.validated_data)
        return Response({"success": True}, status=status.HTTP_200_OK)

    @extend_schema(responses={200: SuccessResponseSerializer})
    def delete(self, request, user_id):
        AccountService.delete_user(user_id)
        return Response({"success": True}, status=status.HTTP_200_OK)

"""관리자 유저 관리 시리얼라이저"""

from rest_framework import serializers

from apps.accounts.models import User

from .user_serializer import ProfileUpdateSerializer, UserSerializer


class AdminUserUpdateSerializer(ProfileUpdateSerializer):
    """관리자 유저 수정 (name, email, role만 허용)"""

    role = serializers.ChoiceField(choices=User.Role.choices, required=False)


class UserListResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    users = UserSerializer(many=True)


class UserDetailResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    user = UserSerializer()

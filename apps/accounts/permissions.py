"""역할 기반 권한 클래스"""

from rest_framework import permissions

from apps.accounts.models import User
from apps.core.exceptions import Forbidden


class IsAdminRole(permissions.BasePermission):
    """role == admin 인 인증된 유저만 허용"""

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        if not isinstance(user, User):
            return False

        if not user.is_admin:
            raise Forbidden(f"Role ({user.role}) is not allowed to access this resource")
        return True

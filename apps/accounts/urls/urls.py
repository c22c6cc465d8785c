from django.urls import path

from apps.accounts.views.admin_views import AdminUserDetailView, AdminUserListView
from apps.accounts.views.password_views import ForgotPasswordView, ResetPasswordView
from apps.accounts.views.user_views import (
    CurrentUserView,
    LoginView,
    LogoutView,
    PasswordUpdateView,
    ProfileUpdateView,
    RegisterView,
)

app_name = "accounts"

urlpatterns = [
    # 인증
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    # 비밀번호
    path("password/forgot/", ForgotPasswordView.as_view(), name="password-forgot"),
    path("password/reset/<str:token>/", ResetPasswordView.as_view(), name="password-reset"),
    path("password/update/", PasswordUpdateView.as_view(), name="password-update"),
    # 프로필
    path("me/", CurrentUserView.as_view(), name="current-user"),
    path("me/update/", ProfileUpdateView.as_view(), name="profile-update"),
    # 관리자
    path("admin/users/", AdminUserListView.as_view(), name="admin-users"),
    path("admin/user/<str:user_id>/", AdminUserDetailView.as_view(), name="admin-user-detail"),
]

"""비밀번호 재설정 테스트"""

import re
from datetime import timedelta
from io import StringIO
from smtplib import SMTPException
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core import mail
from django.core.management import call_command
from django.db import DatabaseError
from django.test import TestCase, override_settings
from django.utils import timezone

from rest_framework import status
from rest_framework.test import APIClient

from apps.accounts.models import hash_reset_token
from apps.accounts.services import PasswordService
from apps.accounts.services.auth_service import INVALID_RESET_TOKEN_MESSAGE
from apps.core.exceptions import Internal, InvalidInput, NotFound

User = get_user_model()

RESET_URL_PATTERN = re.compile(r"/password/reset/([0-9a-f]+)")


def extract_raw_token(message):
    """이메일 본문에서 원본 토큰 추출"""
    return RESET_URL_PATTERN.search(message.body).group(1)


class ResetTokenModelTest(TestCase):
    """User 재설정 토큰 필드 테스트"""

    def setUp(self):
        self.user = User.objects.create_user(
            email="test@example.com", name="Tester", password="secret123"
        )

    def test_only_hash_is_stored(self):
        raw_token = self.user.get_reset_password_token()

        self.assertNotEqual(self.user.reset_password_token, raw_token)
        self.assertEqual(self.user.reset_password_token, hash_reset_token(raw_token))
        self.assertEqual(len(self.user.reset_password_token), 64)

    def test_token_generation_unique(self):
        token1 = self.user.get_reset_password_token()
        token2 = self.user.get_reset_password_token()
        self.assertNotEqual(token1, token2)

    @override_settings(RESET_PASSWORD_TOKEN_EXPIRE_MINUTES=15)
    def test_expiry_is_in_the_future(self):
        before = timezone.now()
        self.user.get_reset_password_token()

        self.assertGreater(self.user.reset_password_expire, before)
        self.assertLessEqual(
            self.user.reset_password_expire, timezone.now() + timedelta(minutes=15)
        )

    def test_clear_resets_both_fields(self):
        self.user.get_reset_password_token()
        self.user.clear_reset_password_token()

        self.assertIsNone(self.user.reset_password_token)
        self.assertIsNone(self.user.reset_password_expire)

    def test_with_valid_reset_token_excludes_expired(self):
        raw_token = self.user.get_reset_password_token()
        self.user.save()
        self.assertTrue(User.objects.with_valid_reset_token(raw_token).exists())

        User.objects.filter(pk=self.user.pk).update(
            reset_password_expire=timezone.now() - timedelta(seconds=1)
        )
        self.assertFalse(User.objects.with_valid_reset_token(raw_token).exists())


class PasswordServiceTest(TestCase):
    """PasswordService 테스트"""

    def setUp(self):
        self.user = User.objects.create_user(
            email="service@example.com", name="Service", password="secret123"
        )

    def test_forgot_password_sends_raw_token(self):
        sent_to = PasswordService.forgot_password(self.user.email)

        self.assertEqual(sent_to, self.user.email)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, [self.user.email])
        self.assertIn("Password Recovery", mail.outbox[0].subject)

        raw_token = extract_raw_token(mail.outbox[0])
        self.assertIn(f"http://testserver/password/reset/{raw_token}", mail.outbox[0].body)
        self.user.refresh_from_db()
        self.assertEqual(self.user.reset_password_token, hash_reset_token(raw_token))
        self.assertIsNotNone(self.user.reset_password_expire)

    def test_forgot_password_unknown_email(self):
        """존재하지 않는 이메일 - 404, 변경 없음"""
        with self.assertRaises(NotFound):
            PasswordService.forgot_password("nonexistent@example.com")

        self.assertEqual(len(mail.outbox), 0)
        self.assertFalse(User.objects.filter(reset_password_token__isnull=False).exists())

    def test_second_forgot_password_invalidates_first_token(self):
        PasswordService.forgot_password(self.user.email)
        PasswordService.forgot_password(self.user.email)
        first, second = (extract_raw_token(m) for m in mail.outbox)

        with self.assertRaises(InvalidInput):
            PasswordService.reset_password(first, "newsecret", "newsecret")
        PasswordService.reset_password(second, "newsecret", "newsecret")

    @patch("apps.accounts.services.auth_service.send_password_reset_email")
    def test_send_failure_rolls_back_token(self, mock_send):
        """메일 전송 실패 - 토큰 필드 초기화 후 500"""
        mock_send.side_effect = SMTPException("SMTP server unavailable")

        with self.assertRaises(Internal) as ctx:
            PasswordService.forgot_password(self.user.email)

        self.assertEqual(str(ctx.exception.detail), "SMTP server unavailable")
        self.user.refresh_from_db()
        self.assertIsNone(self.user.reset_password_token)
        self.assertIsNone(self.user.reset_password_expire)

    @patch("apps.accounts.services.auth_service.send_password_reset_email")
    def test_rollback_failure_still_reports_send_error(self, mock_send):
        mock_send.side_effect = SMTPException("SMTP server unavailable")
        original_save = User.save

        def save_then_fail(instance, *args, **kwargs):
            if instance.reset_password_token is None:
                raise DatabaseError("connection lost")
            return original_save(instance, *args, **kwargs)

        with patch.object(User, "save", save_then_fail):
            with self.assertLogs("apps.accounts.services.auth_service", level="ERROR") as logs:
                with self.assertRaises(Internal) as ctx:
                    PasswordService.forgot_password(self.user.email)

        self.assertEqual(str(ctx.exception.detail), "SMTP server unavailable")
        self.assertTrue(any("rollback failed" in line for line in logs.output))

    def test_reset_password_success(self):
        PasswordService.forgot_password(self.user.email)
        raw_token = extract_raw_token(mail.outbox[0])

        user = PasswordService.reset_password(raw_token, "newsecret", "newsecret")

        self.assertEqual(user, self.user)
        user.refresh_from_db()
        self.assertTrue(user.check_password("newsecret"))
        self.assertIsNone(user.reset_password_token)
        self.assertIsNone(user.reset_password_expire)

    def test_reset_password_invalid_token(self):
        with self.assertRaises(InvalidInput) as ctx:
            PasswordService.reset_password("invalid_token", "newsecret", "newsecret")
        self.assertEqual(str(ctx.exception.detail), INVALID_RESET_TOKEN_MESSAGE)

    def test_reset_password_expired_token_same_message(self):
        raw_token = self.user.get_reset_password_token()
        self.user.reset_password_expire = timezone.now() - timedelta(minutes=1)
        self.user.save()

        with self.assertRaises(InvalidInput) as ctx:
            PasswordService.reset_password(raw_token, "newsecret", "newsecret")
        self.assertEqual(str(ctx.exception.detail), INVALID_RESET_TOKEN_MESSAGE)

    def test_reset_password_used_token(self):
        PasswordService.forgot_password(self.user.email)
        raw_token = extract_raw_token(mail.outbox[0])
        PasswordService.reset_password(raw_token, "newsecret", "newsecret")

        with self.assertRaises(InvalidInput):
            PasswordService.reset_password(raw_token, "another1", "another1")

    def test_reset_password_mismatch_keeps_password(self):
        PasswordService.forgot_password(self.user.email)
        raw_token = extract_raw_token(mail.outbox[0])
        old_hash = User.objects.get(pk=self.user.pk).password

        with self.assertRaises(InvalidInput) as ctx:
            PasswordService.reset_password(raw_token, "newsecret", "different")

        self.assertEqual(str(ctx.exception.detail), "Password does not match")
        self.user.refresh_from_db()
        self.assertEqual(self.user.password, old_hash)
        # 토큰은 그대로 유효
        self.assertIsNotNone(self.user.reset_password_token)


class PasswordResetE2ETest(TestCase):
    """비밀번호 재설정 E2E 테스트"""

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="e2e@example.com", name="E2E", password="oldsecret"
        )

    def request_reset(self):
        response = self.client.post(
            "/api/v1/password/forgot/", {"email": self.user.email}, format="json"
        )
        return response, extract_raw_token(mail.outbox[-1]) if mail.outbox else None

    def test_complete_password_reset_flow(self):
        # 1. 재설정 요청
        response, raw_token = self.request_reset()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data, {"success": True, "message": "Email sent to: e2e@example.com"}
        )

        # 2. 비밀번호 재설정 - 토큰 발급
        response = self.client.put(
            f"/api/v1/password/reset/{raw_token}/",
            {"password": "newsecret", "confirmPassword": "newsecret"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["token"])
        self.assertEqual(response.data["user"]["email"], self.user.email)

        # 3. 새 비밀번호로 로그인
        response = self.client.post(
            "/api/v1/login/", {"email": self.user.email, "password": "newsecret"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_nonexistent_email(self):
        response = self.client.post(
            "/api/v1/password/forgot/", {"email": "nonexistent@example.com"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(response.data["success"])
        self.assertEqual(len(mail.outbox), 0)

    def test_malformed_or_missing_email_is_not_found(self):
        """형식 오류/누락도 400이 아닌 404"""
        for data in ({"email": "nobody"}, {"email": ""}, {}):
            with self.subTest(data=data):
                response = self.client.post("/api/v1/password/forgot/", data, format="json")

                self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
                self.assertEqual(
                    response.data,
                    {"success": False, "message": "User not found with this email"},
                )
        self.assertEqual(len(mail.outbox), 0)
        self.assertFalse(User.objects.filter(reset_password_token__isnull=False).exists())

    def test_mixed_case_domain(self):
        """가입 시 입력한 대소문자 그대로 요청해도 전송"""
        User.objects.create_user(email="bob@Example.COM", name="Bob", password="secret123")

        response = self.client.post(
            "/api/v1/password/forgot/", {"email": "bob@Example.COM"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Email sent to: bob@example.com")
        self.assertEqual(mail.outbox[0].to, ["bob@example.com"])

    @patch("apps.accounts.services.auth_service.send_password_reset_email")
    def test_send_failure_returns_500(self, mock_send):
        mock_send.side_effect = SMTPException("SMTP server unavailable")

        response = self.client.post(
            "/api/v1/password/forgot/", {"email": self.user.email}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(
            response.data, {"success": False, "message": "SMTP server unavailable"}
        )

    def test_token_reuse_prevention(self):
        _, raw_token = self.request_reset()
        data = {"password": "newsecret", "confirmPassword": "newsecret"}

        first = self.client.put(f"/api/v1/password/reset/{raw_token}/", data, format="json")
        second = self.client.put(f"/api/v1/password/reset/{raw_token}/", data, format="json")

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(second.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(second.data["message"], INVALID_RESET_TOKEN_MESSAGE)

    def test_expired_token_rejection(self):
        _, raw_token = self.request_reset()
        User.objects.filter(pk=self.user.pk).update(
            reset_password_expire=timezone.now() - timedelta(minutes=1)
        )

        response = self.client.put(
            f"/api/v1/password/reset/{raw_token}/",
            {"password": "newsecret", "confirmPassword": "newsecret"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], INVALID_RESET_TOKEN_MESSAGE)

    def test_password_mismatch(self):
        _, raw_token = self.request_reset()

        response = self.client.put(
            f"/api/v1/password/reset/{raw_token}/",
            {"password": "newsecret", "confirmPassword": "different"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Password does not match")
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("oldsecret"))

    def test_password_too_short(self):
        _, raw_token = self.request_reset()

        response = self.client.put(
            f"/api/v1/password/reset/{raw_token}/",
            {"password": "123", "confirmPassword": "123"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class CleanupExpiredTokensCommandTest(TestCase):
    """cleanup_expired_tokens 커맨드"""

    def setUp(self):
        self.expired = User.objects.create_user(email="old@x.com", name="Old", password="secret123")
        self.expired.get_reset_password_token()
        self.expired.reset_password_expire = timezone.now() - timedelta(minutes=1)
        self.expired.save()

        self.pending = User.objects.create_user(email="new@x.com", name="New", password="secret123")
        self.pending.get_reset_password_token()
        self.pending.save()

    def test_clears_only_expired_tokens(self):
        out = StringIO()
        call_command("cleanup_expired_tokens", stdout=out)

        self.expired.refresh_from_db()
        self.pending.refresh_from_db()
        self.assertIsNone(self.expired.reset_password_token)
        self.assertIsNone(self.expired.reset_password_expire)
        self.assertIsNotNone(self.pending.reset_password_token)
        self.assertIn("1", out.getvalue())

    def test_dry_run_changes_nothing(self):
        out = StringIO()
        call_command("cleanup_expired_tokens", "--dry-run", stdout=out)

        self.expired.refresh_from_db()
        self.assertIsNotNone(self.expired.reset_password_token)
        self.assertIn("DRY-RUN", out.getvalue())

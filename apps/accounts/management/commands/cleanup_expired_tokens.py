"""만료된 비밀번호 재설정 토큰 정리 커맨드"""

from django.core.management.base import BaseCommand

from apps.accounts.models import User


class Command(BaseCommand):
    help = "만료된 비밀번호 재설정 토큰(해시 + 만료 시간) 초기화"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="실제 초기화 없이 대상 유저 수만 확인",
        )

    def handle(self, *args, **options):
        if options["dry_run"]:
            count = User.objects.expired_reset_tokens().count()
            self.stdout.write(self.style.WARNING(f"[DRY-RUN] 만료된 재설정 토큰: {count}개"))
            return

        cleared_count = User.objects.clear_expired_reset_tokens()
        self.stdout.write(self.style.SUCCESS(f"만료된 재설정 토큰 {cleared_count}개 초기화 완료"))

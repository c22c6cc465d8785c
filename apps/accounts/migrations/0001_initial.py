from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                (
                    "last_login",
                    models.DateTimeField(blank=True, null=True, verbose_name="last login"),
                ),
                ("name", models.CharField(help_text="표시 이름", max_length=30)),
                (
                    "email",
                    models.EmailField(
                        db_index=True,
                        help_text="이메일 주소 (로그인 ID)",
                        max_length=254,
                        unique=True,
                    ),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[("user", "User"), ("admin", "Admin")],
                        default="user",
                        help_text="권한 역할",
                        max_length=10,
                    ),
                ),
                (
                    "avatar_public_id",
                    models.CharField(help_text="아바타 저장소 키", max_length=255),
                ),
                ("avatar_url", models.URLField(help_text="아바타 URL", max_length=500)),
                (
                    "reset_password_token",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        help_text="재설정 토큰 해시",
                        max_length=64,
                        null=True,
                    ),
                ),
                (
                    "reset_password_expire",
                    models.DateTimeField(blank=True, help_text="재설정 토큰 만료 시간", null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "사용자",
                "verbose_name_plural": "사용자",
                "db_table": "users",
                "ordering": ["-created_at"],
            },
        ),
    ]

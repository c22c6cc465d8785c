from django.apps import AppConfig


class CoreConfig(AppConfig):
    """공통 앱 설정 (예외 처리, S3 저장소)"""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.core"
    label = "core"

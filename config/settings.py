"""
Django 설정 파일 (config 프로젝트)

ShopIT 계정 API 서버 설정.

이 파일에 대한 자세한 정보:
https://docs.djangoproject.com/en/6.0/topics/settings/

전체 설정 목록 및 값:
https://docs.djangoproject.com/en/6.0/ref/settings/
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

# 프로젝트 기본 경로 설정: BASE_DIR / 'subdir' 형태로 사용
BASE_DIR = Path(__file__).resolve().parent.parent


# 보안 경고: 프로덕션 환경에서는 시크릿 키를 반드시 비밀로 유지할 것!
SECRET_KEY = os.getenv(
    "SECRET_KEY", "django-insecure-7w!b4q=0r@k2$z8v+e1l^m3x(9n#c5h&u6t*y-p)j0g%s@f2a"
)

# 보안 경고: 프로덕션 환경에서는 DEBUG를 켜지 말 것!
DEBUG = os.getenv("DEBUG", "True") == "True"

ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "*").split(",")


# 애플리케이션 정의

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "corsheaders",
    "apps.accounts",
    "apps.core",  # 예외 처리, S3 아바타 저장소
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"


# 데이터베이스
# https://docs.djangoproject.com/en/6.0/ref/settings/#databases

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("DB_NAME", "shopit"),
        "USER": os.getenv("DB_USER", "postgres"),
        "PASSWORD": os.getenv("DB_PASSWORD", "postgres"),
        "HOST": os.getenv("DB_HOST", "localhost"),  # 하이브리드: localhost, Docker: "db"
        "PORT": os.getenv("DB_PORT", "5432"),
    }
}


# 비밀번호 검증
# 입력 검증은 Serializer에서 처리하므로 Django 기본 validators는 비활성화

AUTH_PASSWORD_VALIDATORS = []


# 국제화 (i18n)

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True


# 정적 파일 (drf-spectacular 문서 페이지용)

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# 기본 Primary Key 필드 타입
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# CORS 설정
CORS_ALLOW_ALL_ORIGINS = DEBUG
CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",")
CORS_ALLOW_CREDENTIALS = True

# WhiteNoise 설정
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# 인증 설정
AUTH_USER_MODEL = "accounts.User"

# Django REST Framework 설정
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "apps.accounts.authentication.JWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "EXCEPTION_HANDLER": "apps.core.handlers.api_exception_handler",
}

# Swagger/OpenAPI 설정
SPECTACULAR_SETTINGS = {
    "TITLE": "ShopIT Accounts API",
    "DESCRIPTION": "회원가입, 로그인, 비밀번호 재설정, 관리자 유저 관리 API",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "SCHEMA_PATH_PREFIX": r"/api/v1",
}

# 이메일 설정
EMAIL_BACKEND = os.getenv("EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")
EMAIL_HOST = os.getenv("EMAIL_HOST", "smtp.mailtrap.io")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "2525"))
EMAIL_USE_TLS = os.getenv("EMAIL_USE_TLS", "True") == "True"
EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD", "")
DEFAULT_FROM_EMAIL = os.getenv("DEFAULT_FROM_EMAIL", "ShopIT <noreply@shopit.com>")

# 프론트엔드 URL (비밀번호 재설정 링크용)
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

# 세션 토큰 (JWT) 설정
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", str(60 * 24 * 7)))
COOKIE_EXPIRES_DAYS = int(os.getenv("COOKIE_EXPIRES_DAYS", "7"))
AUTH_COOKIE_NAME = "token"
AUTH_COOKIE_SECURE = os.getenv("AUTH_COOKIE_SECURE", str(not DEBUG)) == "True"

# 비밀번호 재설정 토큰 유효 시간 (분)
RESET_PASSWORD_TOKEN_EXPIRE_MINUTES = int(os.getenv("RESET_PASSWORD_TOKEN_EXPIRE_MINUTES", "15"))

# 기본 아바타 (회원가입 시 지정)
DEFAULT_AVATAR_PUBLIC_ID = os.getenv("DEFAULT_AVATAR_PUBLIC_ID", "avatars/default_avatar.jpg")
DEFAULT_AVATAR_URL = os.getenv(
    "DEFAULT_AVATAR_URL",
    "https://shopit-media.s3.ap-northeast-2.amazonaws.com/avatars/default_avatar.jpg",
)

# AWS S3 설정 (아바타 저장소)
AWS_S3_ACCESS_KEY_ID = os.getenv("AWS_S3_ACCESS_KEY_ID", "")
AWS_S3_SECRET_ACCESS_KEY = os.getenv("AWS_S3_SECRET_ACCESS_KEY", "")
AWS_S3_BUCKET_NAME = os.getenv("AWS_S3_BUCKET_NAME", "")
AWS_S3_REGION = os.getenv("AWS_S3_REGION", "ap-northeast-2")

# 로깅 설정
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "apps": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}

"""아바타 미디어 저장소 (S3)"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache, wraps
from typing import Any

from django.conf import settings

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from apps.core.exceptions import Internal, InvalidInput, NotFound

logger = logging.getLogger(__name__)

MISSING_OBJECT_CODES = ("404", "NoSuchKey", "NotFound")


def media_errors(action: str) -> Callable[..., Any]:
    """boto 예외를 Internal(500)로 변환 (타입 에러는 그대로 전달)"""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (InvalidInput, NotFound):
                raise
            except ClientError as e:
                code = e.response.get("Error", {}).get("Code", "Unknown")
                logger.error("Avatar %s failed: %s", action, code, exc_info=True)
                raise Internal(f"Avatar {action} failed: {code}") from e
            except BotoCoreError as e:
                # NoCredentialsError, ParamValidationError 포함
                logger.error("Avatar %s failed", action, exc_info=True)
                raise Internal(f"Avatar {action} failed: {e}") from e
            except Exception as e:
                logger.error("Unexpected error during avatar %s", action, exc_info=True)
                raise Internal(f"Avatar {action} failed: {e}") from e

        return wrapper

    return decorator


class AvatarStorage:
    """사용자 아바타 객체 관리 (public_id == S3 객체 키)"""

    @staticmethod
    @lru_cache(maxsize=1)
    def client() -> Any:
        return boto3.client(
            "s3",
            aws_access_key_id=settings.AWS_S3_ACCESS_KEY_ID or None,
            aws_secret_access_key=settings.AWS_S3_SECRET_ACCESS_KEY or None,
            region_name=settings.AWS_S3_REGION or None,
        )

    @property
    def bucket(self) -> str:
        return settings.AWS_S3_BUCKET_NAME

    @media_errors("deletion")
    def delete(self, public_id: str) -> str:
        """아바타 객체 삭제

        Returns:
            삭제된 객체 키

        Raises:
            InvalidInput: public_id가 비어 있음
            NotFound: 객체가 존재하지 않음
            Internal: 저장소 오류
        """
        if not public_id or not public_id.strip():
            raise InvalidInput("Avatar public_id is required")

        s3 = self.client()
        try:
            s3.head_object(Bucket=self.bucket, Key=public_id)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in MISSING_OBJECT_CODES:
                raise NotFound(f"Avatar not found: {public_id}") from e
            raise

        s3.delete_object(Bucket=self.bucket, Key=public_id)
        logger.info("Avatar deleted: %s", public_id)
        return public_id


avatar_storage = AvatarStorage()

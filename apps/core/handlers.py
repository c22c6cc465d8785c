"""DRF 예외 핸들러 ({success: false, message} 응답)"""

from __future__ import annotations

import logging
from typing import Any

from django.http import Http404

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.core.exceptions import Internal, NotFound

logger = logging.getLogger(__name__)


def _first_message(detail: Any) -> str:
    """ValidationError detail(dict/list 중첩)에서 첫 메시지 추출"""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """모든 예외를 {success: false, message} 형태로 변환

    분류되지 않은 예외는 로그를 남기고 500으로 응답한다.
    """
    if isinstance(exc, Http404):
        exc = NotFound()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled exception in %s", view.__class__.__name__ if view else "view", exc_info=exc
        )
        return Response(
            {"success": False, "message": Internal.default_detail},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response.data = {"success": False, "message": _first_message(exc.detail)}
    return response

"""API 에러 타입

rest_framework.exceptions / status 외의 DRF 모듈은 import 하지 않는다.
예외 핸들러는 apps.core.handlers 에 있다.
"""

from rest_framework import exceptions, status


class InvalidInput(exceptions.APIException):
    """호출자가 수정 가능한 잘못된 입력 (400)"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input."
    default_code = "invalid_input"


class Unauthorized(exceptions.APIException):
    """인증 실패 (401)"""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Login first to access this resource"
    default_code = "unauthorized"


class Forbidden(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You are not allowed to access this resource"
    default_code = "forbidden"


class NotFound(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
    default_code = "not_found"


class Internal(exceptions.APIException):
    """협력 컴포넌트 실패 (메일 전송 등) (500)"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal Server Error"
    default_code = "internal"

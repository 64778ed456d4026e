"""
Err -> HTTP 응답 매핑

유스케이스가 돌려준 Err 코드를 상태 코드로 변환합니다.
"""

from __future__ import annotations

from common.application.result import (
    CONFLICT,
    FAILED_PRECONDITION,
    INVALID_ARGUMENT,
    NOT_FOUND,
    UNAUTHORIZED,
    Err,
)
from rest_framework import status
from rest_framework.response import Response

ERROR_STATUS = {
    INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    FAILED_PRECONDITION: status.HTTP_400_BAD_REQUEST,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CONFLICT: status.HTTP_409_CONFLICT,
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


def error_response(err: Err) -> Response:
    body = {"error_code": err.code, "error": err.message}
    if err.details:
        body["details"] = err.details
    return Response(
        body,
        status=ERROR_STATUS.get(err.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )

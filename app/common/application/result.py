from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

# 유스케이스가 반환하는 에러 코드 (HTTP 매핑은 common.http 참고)
INVALID_ARGUMENT = "INVALID_ARGUMENT"
NOT_FOUND = "NOT_FOUND"
FAILED_PRECONDITION = "FAILED_PRECONDITION"
CONFLICT = "CONFLICT"
UNAUTHORIZED = "UNAUTHORIZED"


@dataclass(frozen=True, slots=True)
class Err:
    """
    유스케이스 실패 결과.

    - code: 프로그램적으로 구분 가능한 에러 코드 (예: "NOT_FOUND", "CONFLICT")
    - message: 사용자/로그용 메시지
    - details: 어떤 값이 문제였는지 알려주는 추가 정보(선택)
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """유스케이스 성공 결과."""

    value: T


Result = Ok[T] | Err

from __future__ import annotations

import logging
from typing import Optional

from common.application.result import CONFLICT, FAILED_PRECONDITION, Err, Ok, Result
from common.ports.department_repo import DepartmentRepositoryPort
from common.ports.location_repo import LocationRepositoryPort

logger = logging.getLogger(__name__)


class IntegrityGuard:
    """
    쓰기 전에 참조 무결성/유일성 규칙을 검사합니다.

    - Job 생성/수정: location_id, department_id 가 실제로 존재해야 함
    - Department 생성/수정: title 이 다른 부서와 겹치면 안 됨 (대소문자 구분)

    저장소 상태만 읽으며 아무것도 쓰지 않습니다. 검사와 저장이 원자적이지 않으므로
    동시 쓰기 경합은 DB 제약(unique, FK)이 최종적으로 막습니다.
    """

    def __init__(
        self,
        *,
        location_repo: LocationRepositoryPort,
        department_repo: DepartmentRepositoryPort,
    ):
        self._location_repo = location_repo
        self._department_repo = department_repo

    def validate_job_references(
        self, *, location_id: int, department_id: int
    ) -> Result[None]:
        missing: dict[str, int] = {}
        messages: list[str] = []

        if not self._location_repo.exists(location_id):
            missing["location_id"] = location_id
            messages.append(f"Location with ID {location_id} does not exist.")

        if not self._department_repo.exists(department_id):
            missing["department_id"] = department_id
            messages.append(f"Department with ID {department_id} does not exist.")

        if missing:
            logger.warning(f"Rejected job write, missing references: {missing}")
            return Err(
                code=FAILED_PRECONDITION,
                message=" ".join(messages),
                details=missing,
            )
        return Ok(None)

    def validate_department_title_unique(
        self, *, title: str, exclude_id: Optional[int] = None
    ) -> Result[None]:
        existing = self._department_repo.find_by_title(title)
        if existing is None or existing.id == exclude_id:
            return Ok(None)

        logger.warning(
            f"Rejected department write, title '{title}' taken by {existing.id}"
        )
        if exclude_id is None:
            message = f"Department with title '{title}' already exists."
        else:
            message = f"Another department with title '{title}' already exists."
        return Err(code=CONFLICT, message=message, details={"title": title})

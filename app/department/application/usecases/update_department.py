from __future__ import annotations

import logging

from common.application.integrity_guard import IntegrityGuard
from common.application.result import NOT_FOUND, Err, Ok, Result
from common.ports.department_repo import DepartmentRepositoryPort
from department.domain.department import DepartmentDomain

logger = logging.getLogger(__name__)


class UpdateDepartmentUseCase:
    """
    부서 수정 (전체 교체).

    자기 자신의 현재 title 로 다시 저장하는 것은 충돌이 아닙니다.
    """

    def __init__(
        self,
        *,
        department_repo: DepartmentRepositoryPort,
        integrity_guard: IntegrityGuard,
    ):
        self._department_repo = department_repo
        self._guard = integrity_guard

    def execute(self, *, department_id: int, title: str) -> Result[DepartmentDomain]:
        current = self._department_repo.get_by_id(department_id)
        if current is None:
            return Err(
                code=NOT_FOUND, message=f"Department {department_id} not found"
            )

        checked = self._guard.validate_department_title_unique(
            title=title, exclude_id=department_id
        )
        if isinstance(checked, Err):
            return checked

        result = self._department_repo.update(
            DepartmentDomain(id=current.id, title=title)
        )
        if isinstance(result, Ok):
            logger.info(f"Updated Department {department_id}")
        return result

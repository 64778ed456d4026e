from __future__ import annotations

import logging

from common.application.integrity_guard import IntegrityGuard
from common.application.result import Err, Ok, Result
from common.ports.department_repo import DepartmentRepositoryPort
from department.domain.department import DepartmentDomain

logger = logging.getLogger(__name__)


class CreateDepartmentUseCase:
    """부서 생성. 같은 title 의 부서가 있으면 CONFLICT."""

    def __init__(
        self,
        *,
        department_repo: DepartmentRepositoryPort,
        integrity_guard: IntegrityGuard,
    ):
        self._department_repo = department_repo
        self._guard = integrity_guard

    def execute(self, *, title: str) -> Result[DepartmentDomain]:
        checked = self._guard.validate_department_title_unique(title=title)
        if isinstance(checked, Err):
            return checked

        result = self._department_repo.insert(title=title)
        if isinstance(result, Ok):
            logger.info(f"Created Department {result.value.id} ('{title}')")
        return result

"""
Department Service

부서 조회/생성/수정. 생성/수정은 title 유일성 검사를 거치는 유스케이스에 위임합니다.
"""

import logging
from typing import List

from common.adapters.django_department_repo import DjangoDepartmentRepository
from common.application.result import NOT_FOUND, Err, Ok, Result
from department.application.container import (
    build_create_department_usecase,
    build_update_department_usecase,
)
from department.domain.department import DepartmentDomain

logger = logging.getLogger(__name__)


class DepartmentService:
    @staticmethod
    def get_department(department_id: int) -> Result[DepartmentDomain]:
        department = DjangoDepartmentRepository().get_by_id(department_id)
        if department is None:
            logger.warning(f"Department {department_id} not found")
            return Err(
                code=NOT_FOUND, message=f"Department {department_id} not found"
            )
        return Ok(department)

    @staticmethod
    def get_all_departments() -> List[DepartmentDomain]:
        return DjangoDepartmentRepository().list_all()

    @staticmethod
    def create_department(*, title: str) -> Result[DepartmentDomain]:
        return build_create_department_usecase().execute(title=title)

    @staticmethod
    def update_department(
        department_id: int, *, title: str
    ) -> Result[DepartmentDomain]:
        return build_update_department_usecase().execute(
            department_id=department_id, title=title
        )

from __future__ import annotations

from common.adapters.django_department_repo import DjangoDepartmentRepository
from common.application.container import build_integrity_guard
from department.application.usecases.create_department import (
    CreateDepartmentUseCase,
)
from department.application.usecases.update_department import (
    UpdateDepartmentUseCase,
)


def build_create_department_usecase() -> CreateDepartmentUseCase:
    return CreateDepartmentUseCase(
        department_repo=DjangoDepartmentRepository(),
        integrity_guard=build_integrity_guard(),
    )


def build_update_department_usecase() -> UpdateDepartmentUseCase:
    return UpdateDepartmentUseCase(
        department_repo=DjangoDepartmentRepository(),
        integrity_guard=build_integrity_guard(),
    )

from __future__ import annotations

from typing import Optional

from common.application.result import CONFLICT, Err, Ok, Result
from department.domain.department import DepartmentDomain
from department.models import Department
from django.db import IntegrityError, transaction


def to_department_domain(obj: Department) -> DepartmentDomain:
    return DepartmentDomain(id=int(obj.id), title=obj.title)


class DjangoDepartmentRepository:
    def exists(self, department_id: int) -> bool:
        return Department.objects.filter(id=department_id).exists()

    def get_by_id(self, department_id: int) -> Optional[DepartmentDomain]:
        obj = Department.objects.filter(id=department_id).first()
        return to_department_domain(obj) if obj is not None else None

    def find_by_title(self, title: str) -> Optional[DepartmentDomain]:
        obj = Department.objects.filter(title__exact=title).order_by("id").first()
        return to_department_domain(obj) if obj is not None else None

    def list_all(self) -> list[DepartmentDomain]:
        return [to_department_domain(obj) for obj in Department.objects.order_by("id")]

    def insert(self, *, title: str) -> Result[DepartmentDomain]:
        # 검사와 저장 사이에 같은 title이 먼저 커밋되면 unique 제약이 잡아준다.
        try:
            with transaction.atomic():
                obj = Department.objects.create(title=title)
        except IntegrityError as e:
            return Err(
                code=CONFLICT,
                message=f"Department with title '{title}' already exists.",
                details={"title": title, "reason": str(e)},
            )
        return Ok(to_department_domain(obj))

    def update(self, department: DepartmentDomain) -> Result[DepartmentDomain]:
        try:
            with transaction.atomic():
                Department.objects.filter(id=department.id).update(
                    title=department.title
                )
        except IntegrityError as e:
            return Err(
                code=CONFLICT,
                message=f"Another department with title '{department.title}' already exists.",
                details={"title": department.title, "reason": str(e)},
            )
        return Ok(department)

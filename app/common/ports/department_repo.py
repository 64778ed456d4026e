from __future__ import annotations

from typing import Optional, Protocol

from common.application.result import Result
from department.domain.department import DepartmentDomain


class DepartmentRepositoryPort(Protocol):
    def exists(self, department_id: int) -> bool: ...

    def get_by_id(self, department_id: int) -> Optional[DepartmentDomain]: ...

    def find_by_title(self, title: str) -> Optional[DepartmentDomain]: ...

    def list_all(self) -> list[DepartmentDomain]: ...

    def insert(self, *, title: str) -> Result[DepartmentDomain]: ...

    def update(self, department: DepartmentDomain) -> Result[DepartmentDomain]: ...

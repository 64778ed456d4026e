from __future__ import annotations

from common.adapters.django_department_repo import DjangoDepartmentRepository
from common.adapters.django_location_repo import DjangoLocationRepository
from common.application.integrity_guard import IntegrityGuard


def build_integrity_guard() -> IntegrityGuard:
    """
    Job/Department 유스케이스가 공유하는 무결성 검사기 조립.
    """
    return IntegrityGuard(
        location_repo=DjangoLocationRepository(),
        department_repo=DjangoDepartmentRepository(),
    )

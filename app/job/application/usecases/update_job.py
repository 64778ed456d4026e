from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from common.application.integrity_guard import IntegrityGuard
from common.application.result import NOT_FOUND, Err, Ok, Result
from common.ports.job_repo import JobRepositoryPort
from job.domain.job import JobDomain, to_utc

logger = logging.getLogger(__name__)


class UpdateJobUseCase:
    """
    채용 공고 수정 (전체 교체).

    code / posted_date 는 그대로 유지합니다.
    """

    def __init__(self, *, job_repo: JobRepositoryPort, integrity_guard: IntegrityGuard):
        self._job_repo = job_repo
        self._guard = integrity_guard

    def execute(
        self,
        *,
        job_id: int,
        title: str,
        description: str,
        location_id: int,
        department_id: int,
        closing_date: datetime,
    ) -> Result[JobDomain]:
        current = self._job_repo.get_by_id(job_id)
        if current is None:
            return Err(code=NOT_FOUND, message=f"Job {job_id} not found")

        checked = self._guard.validate_job_references(
            location_id=location_id, department_id=department_id
        )
        if isinstance(checked, Err):
            return checked

        result = self._job_repo.update(
            dataclasses.replace(
                current,
                title=title,
                description=description,
                location_id=location_id,
                department_id=department_id,
                closing_date=to_utc(closing_date),
            )
        )
        if isinstance(result, Ok):
            logger.info(f"Updated Job {job_id}")
        return result

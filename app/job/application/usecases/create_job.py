from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from common.application.integrity_guard import IntegrityGuard
from common.application.result import Err, Ok, Result
from common.ports.job_repo import JobRepositoryPort
from job.domain.job import JobDomain, generate_job_code, to_utc

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateJobUseCase:
    """
    채용 공고 생성 유스케이스.

    - location/department 참조 검사 (IntegrityGuard)
    - 공고 코드 발급 (JOB-XXXXXXXX)
    - posted_date = 현재 UTC, closing_date 는 UTC로 정규화
    """

    def __init__(
        self,
        *,
        job_repo: JobRepositoryPort,
        integrity_guard: IntegrityGuard,
        now: Callable[[], datetime] = _utcnow,
        code_factory: Callable[[], str] = generate_job_code,
    ):
        self._job_repo = job_repo
        self._guard = integrity_guard
        self._now = now
        self._code_factory = code_factory

    def execute(
        self,
        *,
        title: str,
        description: str,
        location_id: int,
        department_id: int,
        closing_date: datetime,
    ) -> Result[JobDomain]:
        checked = self._guard.validate_job_references(
            location_id=location_id, department_id=department_id
        )
        if isinstance(checked, Err):
            return checked

        result = self._job_repo.insert(
            code=self._code_factory(),
            title=title,
            description=description,
            location_id=location_id,
            department_id=department_id,
            posted_date=to_utc(self._now()),
            closing_date=to_utc(closing_date),
        )
        if isinstance(result, Ok):
            logger.info(f"Created Job {result.value.id} ({result.value.code})")
        return result

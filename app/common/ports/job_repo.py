from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from common.application.result import Result
from job.domain.job import JobDetail, JobDomain, JobListFilter, JobSummary


class JobRepositoryPort(Protocol):
    def get_by_id(self, job_id: int) -> Optional[JobDomain]: ...

    def get_detail(self, job_id: int) -> Optional[JobDetail]: ...

    def insert(
        self,
        *,
        code: str,
        title: str,
        description: str,
        location_id: int,
        department_id: int,
        posted_date: datetime,
        closing_date: datetime,
    ) -> Result[JobDomain]: ...

    def update(self, job: JobDomain) -> Result[JobDomain]: ...

    def query(
        self,
        *,
        filters: JobListFilter,
        order: Sequence[str],
        offset: int,
        limit: int,
    ) -> tuple[int, list[JobSummary]]: ...

from __future__ import annotations

from common.application.result import NOT_FOUND, Err, Ok, Result
from common.ports.job_repo import JobRepositoryPort
from job.domain.job import JobDetail


class GetJobDetailUseCase:
    def __init__(self, *, job_repo: JobRepositoryPort):
        self._job_repo = job_repo

    def execute(self, *, job_id: int) -> Result[JobDetail]:
        detail = self._job_repo.get_detail(job_id)
        if detail is None:
            return Err(code=NOT_FOUND, message=f"Job {job_id} not found")
        return Ok(detail)

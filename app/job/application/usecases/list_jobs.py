from __future__ import annotations

import logging
from typing import Optional

from common.application.result import INVALID_ARGUMENT, Err, Ok, Result
from common.ports.job_repo import JobRepositoryPort
from job.domain.job import JOB_LIST_ORDERING, JobListFilter, JobListPage

logger = logging.getLogger(__name__)


class ListJobsUseCase:
    """
    채용 공고 목록 조회 (검색 + 필터 + 페이지네이션).

    1) q 가 있으면 title 또는 description 부분 일치 (대소문자 무시)
    2) location_id / department_id 정확 일치
    3) total 은 페이지와 무관한 전체 건수
    4) posted_date 내림차순, 같으면 id 내림차순
    5) (page_no - 1) * page_size 건을 건너뛰고 page_size 건 반환

    범위를 벗어난 페이지는 items=[] 와 올바른 total 을 돌려줍니다.
    """

    def __init__(self, *, job_repo: JobRepositoryPort):
        self._job_repo = job_repo

    def execute(
        self,
        *,
        query: Optional[str] = None,
        location_id: Optional[int] = None,
        department_id: Optional[int] = None,
        page_no: int = 1,
        page_size: int = 10,
    ) -> Result[JobListPage]:
        invalid = {}
        if page_no < 1:
            invalid["page_no"] = page_no
        if page_size < 1:
            invalid["page_size"] = page_size
        if invalid:
            return Err(
                code=INVALID_ARGUMENT,
                message="page_no and page_size must be >= 1",
                details=invalid,
            )

        filters = JobListFilter(
            query=(query or "").strip() or None,
            location_id=location_id,
            department_id=department_id,
        )
        total, items = self._job_repo.query(
            filters=filters,
            order=JOB_LIST_ORDERING,
            offset=(page_no - 1) * page_size,
            limit=page_size,
        )
        logger.debug(
            f"Listed jobs filters={filters} page={page_no}/{page_size} "
            f"total={total} returned={len(items)}"
        )
        return Ok(JobListPage(total=total, items=items))

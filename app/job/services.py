"""
Job Service

채용 공고 생성/수정/조회/목록 서비스. 실제 로직은 유스케이스에 있습니다.
"""

from datetime import datetime
from typing import Optional

from common.application.result import Result
from job.application.container import (
    build_create_job_usecase,
    build_get_job_detail_usecase,
    build_list_jobs_usecase,
    build_update_job_usecase,
)
from job.domain.job import JobDetail, JobDomain, JobListPage


class JobService:
    """
    채용 공고 서비스

    View 와 유스케이스 사이의 얇은 진입점입니다.
    """

    @staticmethod
    def get_job(job_id: int) -> Result[JobDetail]:
        return build_get_job_detail_usecase().execute(job_id=job_id)

    @staticmethod
    def list_jobs(
        *,
        query: Optional[str] = None,
        location_id: Optional[int] = None,
        department_id: Optional[int] = None,
        page_no: int = 1,
        page_size: int = 10,
    ) -> Result[JobListPage]:
        """
        채용 공고 목록 조회

        Args:
            query: title/description 검색어
            location_id: 근무지 필터
            department_id: 부서 필터
            page_no: 1부터 시작하는 페이지 번호
            page_size: 페이지 크기

        Returns:
            total 과 해당 페이지 items
        """
        return build_list_jobs_usecase().execute(
            query=query,
            location_id=location_id,
            department_id=department_id,
            page_no=page_no,
            page_size=page_size,
        )

    @staticmethod
    def create_job(
        *,
        title: str,
        description: str,
        location_id: int,
        department_id: int,
        closing_date: datetime,
    ) -> Result[JobDomain]:
        return build_create_job_usecase().execute(
            title=title,
            description=description,
            location_id=location_id,
            department_id=department_id,
            closing_date=closing_date,
        )

    @staticmethod
    def update_job(
        job_id: int,
        *,
        title: str,
        description: str,
        location_id: int,
        department_id: int,
        closing_date: datetime,
    ) -> Result[JobDomain]:
        return build_update_job_usecase().execute(
            job_id=job_id,
            title=title,
            description=description,
            location_id=location_id,
            department_id=department_id,
            closing_date=closing_date,
        )

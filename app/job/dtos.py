from __future__ import annotations

from datetime import datetime
from typing import Optional

from job.domain.job import JobDetail, JobDomain, JobSummary
from pydantic import BaseModel, Field

# 참조 대상이 사라졌을 때 응답에만 쓰는 대체 값
NOT_AVAILABLE = "N/A"


class JobDTO(BaseModel):
    id: int
    code: str = Field(description="공고 코드 (JOB-XXXXXXXX)")
    title: str
    description: str
    location_id: int
    department_id: int
    posted_date: datetime
    closing_date: datetime

    @classmethod
    def from_domain(cls, job: JobDomain) -> "JobDTO":
        return cls(
            id=job.id,
            code=job.code,
            title=job.title,
            description=job.description,
            location_id=job.location_id,
            department_id=job.department_id,
            posted_date=job.posted_date,
            closing_date=job.closing_date,
        )


class JobListItemDTO(BaseModel):
    id: int
    code: str
    title: str
    location: str = Field(description="근무지 title")
    department: str = Field(description="부서 title")
    posted_date: datetime
    closing_date: datetime

    @classmethod
    def from_summary(cls, summary: JobSummary) -> "JobListItemDTO":
        return cls(
            id=summary.id,
            code=summary.code,
            title=summary.title,
            location=summary.location_title or NOT_AVAILABLE,
            department=summary.department_title or NOT_AVAILABLE,
            posted_date=summary.posted_date,
            closing_date=summary.closing_date,
        )


class JobListResponseDTO(BaseModel):
    total: int = Field(description="페이지와 무관한 전체 건수")
    data: list[JobListItemDTO]


class LocationDetailDTO(BaseModel):
    id: int = 0
    title: str = NOT_AVAILABLE
    city: str = NOT_AVAILABLE
    state: str = NOT_AVAILABLE
    country: str = NOT_AVAILABLE
    zip: str = NOT_AVAILABLE


class DepartmentDetailDTO(BaseModel):
    id: int = 0
    title: str = NOT_AVAILABLE


class JobDetailDTO(BaseModel):
    id: int
    code: str
    title: str
    description: str
    location: LocationDetailDTO
    department: DepartmentDetailDTO
    posted_date: datetime
    closing_date: datetime

    @classmethod
    def from_detail(cls, detail: JobDetail) -> "JobDetailDTO":
        location: Optional[LocationDetailDTO] = None
        if detail.location is not None:
            location = LocationDetailDTO(
                id=detail.location.id,
                title=detail.location.title,
                city=detail.location.city,
                state=detail.location.state,
                country=detail.location.country,
                zip=detail.location.zip_code,
            )
        department: Optional[DepartmentDetailDTO] = None
        if detail.department is not None:
            department = DepartmentDetailDTO(
                id=detail.department.id, title=detail.department.title
            )

        return cls(
            id=detail.id,
            code=detail.code,
            title=detail.title,
            description=detail.description,
            location=location or LocationDetailDTO(),
            department=department or DepartmentDetailDTO(),
            posted_date=detail.posted_date,
            closing_date=detail.closing_date,
        )

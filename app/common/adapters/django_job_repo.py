from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from common.adapters.django_department_repo import to_department_domain
from common.adapters.django_location_repo import to_location_domain
from common.application.result import CONFLICT, Err, Ok, Result
from department.models import Department
from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet
from job.domain.job import JobDetail, JobDomain, JobListFilter, JobSummary
from job.models import Job
from location.models import Location


def _to_domain(obj: Job) -> JobDomain:
    return JobDomain(
        id=int(obj.id),
        code=obj.code,
        title=obj.title,
        description=obj.description,
        location_id=int(obj.location_id),
        department_id=int(obj.department_id),
        posted_date=obj.posted_date,
        closing_date=obj.closing_date,
    )


def _apply_filters(queryset: QuerySet, filters: JobListFilter) -> QuerySet:
    if filters.query:
        queryset = queryset.filter(
            Q(title__icontains=filters.query) | Q(description__icontains=filters.query)
        )
    if filters.location_id is not None:
        queryset = queryset.filter(location_id=filters.location_id)
    if filters.department_id is not None:
        queryset = queryset.filter(department_id=filters.department_id)
    return queryset


class DjangoJobRepository:
    def get_by_id(self, job_id: int) -> Optional[JobDomain]:
        obj = Job.objects.filter(id=job_id).first()
        return _to_domain(obj) if obj is not None else None

    def get_detail(self, job_id: int) -> Optional[JobDetail]:
        obj = Job.objects.filter(id=job_id).first()
        if obj is None:
            return None

        location = Location.objects.filter(id=obj.location_id).first()
        department = Department.objects.filter(id=obj.department_id).first()
        return JobDetail(
            id=int(obj.id),
            code=obj.code,
            title=obj.title,
            description=obj.description,
            location=to_location_domain(location) if location else None,
            department=to_department_domain(department) if department else None,
            posted_date=obj.posted_date,
            closing_date=obj.closing_date,
        )

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
    ) -> Result[JobDomain]:
        try:
            with transaction.atomic():
                obj = Job.objects.create(
                    code=code,
                    title=title,
                    description=description,
                    location_id=location_id,
                    department_id=department_id,
                    posted_date=posted_date,
                    closing_date=closing_date,
                )
        except IntegrityError as e:
            if Job.objects.filter(code=code).exists():
                return Err(
                    code=CONFLICT,
                    message=f"Job code {code} is already in use",
                    details={"field": "code", "code": code},
                )
            return Err(
                code=CONFLICT,
                message="Job could not be saved",
                details={"code": code, "reason": str(e)},
            )
        return Ok(_to_domain(obj))

    def update(self, job: JobDomain) -> Result[JobDomain]:
        # code / posted_date 는 생성 후 변경하지 않는다.
        try:
            with transaction.atomic():
                Job.objects.filter(id=job.id).update(
                    title=job.title,
                    description=job.description,
                    location_id=job.location_id,
                    department_id=job.department_id,
                    closing_date=job.closing_date,
                )
        except IntegrityError as e:
            return Err(
                code=CONFLICT,
                message=f"Job {job.id} could not be saved",
                details={"reason": str(e)},
            )
        return Ok(self.get_by_id(job.id) or job)

    def query(
        self,
        *,
        filters: JobListFilter,
        order: Sequence[str],
        offset: int,
        limit: int,
    ) -> tuple[int, list[JobSummary]]:
        queryset = _apply_filters(Job.objects.all(), filters)
        total = queryset.count()
        if offset >= total:
            return total, []

        # 남은 행 수로 잘라서 DB 가 받을 수 없는 LIMIT 값이 나가지 않게 한다
        limit = min(limit, total - offset)
        rows = list(queryset.order_by(*order)[offset : offset + limit])
        if not rows:
            return total, []

        # 페이지에 걸린 참조만 한 번에 조회 (JOIN 대신 사용해 참조가 비어도 행이 빠지지 않음)
        location_titles = dict(
            Location.objects.filter(
                id__in={row.location_id for row in rows}
            ).values_list("id", "title")
        )
        department_titles = dict(
            Department.objects.filter(
                id__in={row.department_id for row in rows}
            ).values_list("id", "title")
        )

        items = [
            JobSummary(
                id=int(row.id),
                code=row.code,
                title=row.title,
                location_title=location_titles.get(row.location_id),
                department_title=department_titles.get(row.department_id),
                posted_date=row.posted_date,
                closing_date=row.closing_date,
            )
            for row in rows
        ]
        return total, items

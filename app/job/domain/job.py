from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from department.domain.department import DepartmentDomain
from location.domain.location import LocationDomain

JOB_CODE_PATTERN = re.compile(r"^JOB-[0-9A-F]{8}$")

# 최신 공고 우선, 같은 시각이면 id 역순 (페이지 간 결과가 결정적이도록)
JOB_LIST_ORDERING: tuple[str, ...] = ("-posted_date", "-id")


@dataclass(frozen=True, slots=True)
class JobDomain:
    id: int
    code: str
    title: str
    description: str
    location_id: int
    department_id: int
    posted_date: datetime
    closing_date: datetime


@dataclass(frozen=True, slots=True)
class JobSummary:
    """
    목록 조회용 요약.

    location_title / department_title 이 None 이면 참조 대상이 사라진 경우입니다.
    대체 문자열은 응답 DTO에서만 채웁니다.
    """

    id: int
    code: str
    title: str
    location_title: Optional[str]
    department_title: Optional[str]
    posted_date: datetime
    closing_date: datetime


@dataclass(frozen=True, slots=True)
class JobDetail:
    id: int
    code: str
    title: str
    description: str
    location: Optional[LocationDomain]
    department: Optional[DepartmentDomain]
    posted_date: datetime
    closing_date: datetime


@dataclass(frozen=True, slots=True)
class JobListFilter:
    query: Optional[str] = None
    location_id: Optional[int] = None
    department_id: Optional[int] = None


@dataclass(frozen=True, slots=True)
class JobListPage:
    total: int
    items: list[JobSummary]


def generate_job_code() -> str:
    """`JOB-` + 랜덤 UUID 앞 8자리(대문자 hex)."""
    return f"JOB-{uuid.uuid4().hex[:8].upper()}"


def to_utc(value: datetime) -> datetime:
    # naive 값은 UTC로 간주
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

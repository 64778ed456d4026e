# app/conftest.py
"""
pytest 공통 fixture (API 클라이언트, 관리자 토큰, 기본 데이터)
"""
from datetime import datetime, timedelta, timezone

import pytest
from account.application.container import build_credential_service
from department.models import Department
from job.models import Job
from location.models import Location
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """인증 없는 클라이언트"""
    return APIClient()


@pytest.fixture
def admin_token(settings):
    """
    설정된 관리자 계정으로 발급한 bearer 토큰 문자열.
    """
    result = build_credential_service().authenticate(
        username=settings.ADMIN_CREDENTIALS["USERNAME"],
        password=settings.ADMIN_CREDENTIALS["PASSWORD"],
    )
    return result.value.token


@pytest.fixture
def admin_client(admin_token):
    """Authorization: Bearer <token> 헤더가 붙은 클라이언트"""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {admin_token}")
    return client


@pytest.fixture
def location(db):
    return Location.objects.create(
        title="HQ",
        city="Panaji",
        state="Goa",
        country="India",
        zip_code="403001",
    )


@pytest.fixture
def department(db):
    return Department.objects.create(title="Engineering")


@pytest.fixture
def make_job(db, location, department):
    """
    posted_date 를 직접 지정해 Job 을 만드는 헬퍼.
    """
    counter = {"n": 0}

    def _make(**kwargs):
        counter["n"] += 1
        defaults = {
            "code": f"JOB-{counter['n']:08X}",
            "title": f"Job {counter['n']}",
            "description": "Description",
            "location": location,
            "department": department,
            "posted_date": datetime(2026, 1, 1, tzinfo=timezone.utc),
            "closing_date": datetime(2026, 1, 1, tzinfo=timezone.utc)
            + timedelta(days=30),
        }
        defaults.update(kwargs)
        return Job.objects.create(**defaults)

    return _make

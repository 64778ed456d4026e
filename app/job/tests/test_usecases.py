"""
Tests for Job use cases

JobRepository / IntegrityGuard 를 mock 으로 대체한 단위 테스트
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from common.application.result import (
    CONFLICT,
    FAILED_PRECONDITION,
    INVALID_ARGUMENT,
    NOT_FOUND,
    Err,
    Ok,
)
from job.application.usecases.create_job import CreateJobUseCase
from job.application.usecases.list_jobs import ListJobsUseCase
from job.application.usecases.update_job import UpdateJobUseCase
from job.domain.job import (
    JOB_CODE_PATTERN,
    JOB_LIST_ORDERING,
    JobDomain,
    JobListFilter,
    generate_job_code,
    to_utc,
)

NOW = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)
KST = timezone(timedelta(hours=9))


def make_job(**overrides) -> JobDomain:
    values = {
        "id": 1,
        "code": "JOB-0000000A",
        "title": "Backend Engineer",
        "description": "Build APIs",
        "location_id": 1,
        "department_id": 1,
        "posted_date": NOW,
        "closing_date": NOW + timedelta(days=30),
    }
    values.update(overrides)
    return JobDomain(**values)


class TestJobCode:
    def test_generated_code_format(self):
        """JOB- + 대문자 hex 8자리"""
        codes = {generate_job_code() for _ in range(200)}

        assert all(JOB_CODE_PATTERN.match(code) for code in codes)
        assert len(codes) == 200

    def test_to_utc(self):
        assert to_utc(datetime(2026, 5, 1, 21, 0, tzinfo=KST)) == NOW
        assert to_utc(datetime(2026, 5, 1, 12, 0)) == NOW


class TestCreateJobUseCase:
    def setup_method(self):
        self.job_repo = MagicMock()
        self.guard = MagicMock()
        self.usecase = CreateJobUseCase(
            job_repo=self.job_repo,
            integrity_guard=self.guard,
            now=lambda: NOW,
            code_factory=lambda: "JOB-ABCDEF12",
        )

    def test_create_success(self):
        # Given
        self.guard.validate_job_references.return_value = Ok(None)
        self.job_repo.insert.side_effect = lambda **kwargs: Ok(
            make_job(id=10, **kwargs)
        )

        # When
        result = self.usecase.execute(
            title="Backend Engineer",
            description="Build APIs",
            location_id=1,
            department_id=2,
            closing_date=datetime(2026, 6, 1, 9, 0, tzinfo=KST),
        )

        # Then
        assert isinstance(result, Ok)
        kwargs = self.job_repo.insert.call_args.kwargs
        assert kwargs["code"] == "JOB-ABCDEF12"
        assert kwargs["posted_date"] == NOW
        assert kwargs["closing_date"] == datetime(2026, 6, 1, 0, 0, tzinfo=timezone.utc)
        assert kwargs["closing_date"].tzinfo == timezone.utc

    def test_missing_reference_does_not_write(self):
        self.guard.validate_job_references.return_value = Err(
            code=FAILED_PRECONDITION,
            message="Location with ID 5 does not exist.",
            details={"location_id": 5},
        )

        result = self.usecase.execute(
            title="t",
            description="d",
            location_id=5,
            department_id=2,
            closing_date=NOW,
        )

        assert isinstance(result, Err)
        assert result.code == FAILED_PRECONDITION
        self.job_repo.insert.assert_not_called()

    def test_code_collision_is_reported_without_retry(self):
        """코드 충돌은 재시도 없이 CONFLICT 로 반환"""
        collision = Err(
            code=CONFLICT,
            message="Job code JOB-ABCDEF12 is already in use",
            details={"field": "code", "code": "JOB-ABCDEF12"},
        )
        self.guard.validate_job_references.return_value = Ok(None)
        self.job_repo.insert.return_value = collision

        result = self.usecase.execute(
            title="t",
            description="d",
            location_id=1,
            department_id=2,
            closing_date=NOW,
        )

        assert result == collision
        self.job_repo.insert.assert_called_once()


class TestUpdateJobUseCase:
    def setup_method(self):
        self.job_repo = MagicMock()
        self.guard = MagicMock()
        self.usecase = UpdateJobUseCase(
            job_repo=self.job_repo, integrity_guard=self.guard
        )

    def test_not_found(self):
        self.job_repo.get_by_id.return_value = None

        result = self.usecase.execute(
            job_id=99,
            title="t",
            description="d",
            location_id=1,
            department_id=1,
            closing_date=NOW,
        )

        assert isinstance(result, Err)
        assert result.code == NOT_FOUND
        self.guard.validate_job_references.assert_not_called()

    def test_missing_reference_does_not_write(self):
        self.job_repo.get_by_id.return_value = make_job()
        self.guard.validate_job_references.return_value = Err(
            code=FAILED_PRECONDITION, message="x", details={"department_id": 8}
        )

        result = self.usecase.execute(
            job_id=1,
            title="t",
            description="d",
            location_id=1,
            department_id=8,
            closing_date=NOW,
        )

        assert isinstance(result, Err)
        self.job_repo.update.assert_not_called()

    def test_code_and_posted_date_are_kept(self):
        """전체 교체지만 code / posted_date 는 유지"""
        current = make_job()
        self.job_repo.get_by_id.return_value = current
        self.guard.validate_job_references.return_value = Ok(None)
        self.job_repo.update.side_effect = lambda job: Ok(job)

        result = self.usecase.execute(
            job_id=1,
            title="Senior Backend Engineer",
            description="Own APIs",
            location_id=2,
            department_id=3,
            closing_date=NOW + timedelta(days=60),
        )

        assert isinstance(result, Ok)
        updated = result.value
        assert updated.code == current.code
        assert updated.posted_date == current.posted_date
        assert updated.title == "Senior Backend Engineer"
        assert (updated.location_id, updated.department_id) == (2, 3)


class TestListJobsUseCase:
    def setup_method(self):
        self.job_repo = MagicMock()
        self.job_repo.query.return_value = (0, [])
        self.usecase = ListJobsUseCase(job_repo=self.job_repo)

    def test_invalid_paging_is_rejected_before_query(self):
        for page_no, page_size in [(0, 10), (1, 0), (-1, -1)]:
            result = self.usecase.execute(page_no=page_no, page_size=page_size)

            assert isinstance(result, Err)
            assert result.code == INVALID_ARGUMENT
        self.job_repo.query.assert_not_called()

    def test_offset_and_order(self):
        self.usecase.execute(page_no=3, page_size=20)

        self.job_repo.query.assert_called_once_with(
            filters=JobListFilter(),
            order=JOB_LIST_ORDERING,
            offset=40,
            limit=20,
        )

    def test_query_is_trimmed_and_blank_dropped(self):
        self.usecase.execute(query="  Backend  ", location_id=4)
        self.usecase.execute(query="   ", department_id=7)

        first, second = self.job_repo.query.call_args_list
        assert first.kwargs["filters"] == JobListFilter(query="Backend", location_id=4)
        assert second.kwargs["filters"] == JobListFilter(department_id=7)

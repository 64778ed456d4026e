from __future__ import annotations

from common.adapters.django_job_repo import DjangoJobRepository
from common.application.container import build_integrity_guard
from job.application.usecases.create_job import CreateJobUseCase
from job.application.usecases.get_job import GetJobDetailUseCase
from job.application.usecases.list_jobs import ListJobsUseCase
from job.application.usecases.update_job import UpdateJobUseCase


def build_create_job_usecase() -> CreateJobUseCase:
    """
    Job 유스케이스 조립(Dependency Injection).
    """
    return CreateJobUseCase(
        job_repo=DjangoJobRepository(),
        integrity_guard=build_integrity_guard(),
    )


def build_update_job_usecase() -> UpdateJobUseCase:
    return UpdateJobUseCase(
        job_repo=DjangoJobRepository(),
        integrity_guard=build_integrity_guard(),
    )


def build_get_job_detail_usecase() -> GetJobDetailUseCase:
    return GetJobDetailUseCase(job_repo=DjangoJobRepository())


def build_list_jobs_usecase() -> ListJobsUseCase:
    return ListJobsUseCase(job_repo=DjangoJobRepository())

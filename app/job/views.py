"""
Job Views

채용 공고 API 엔드포인트 (Thin Controller)
"""

from common.application.result import Err
from common.http import error_response
from common.permissions import IsAdministratorOrReadOnly
from drf_spectacular.utils import OpenApiTypes, extend_schema
from job.dtos import JobDetailDTO, JobDTO, JobListItemDTO, JobListResponseDTO
from job.serializers import JobListRequestSerializer, JobWriteSerializer
from job.services import JobService
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ViewSet


class JobViewSet(ViewSet):
    """
    채용 공고 ViewSet (Thin Controller)

    비즈니스 로직은 JobService(유스케이스)에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    permission_classes = [IsAdministratorOrReadOnly]
    lookup_value_regex = r"[0-9]+"

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def retrieve(self, request, pk=None):
        """
        채용 공고 상세 조회

        GET /api/v1/jobs/<id>/
        """
        result = JobService.get_job(int(pk))
        if isinstance(result, Err):
            return error_response(result)
        return Response(JobDetailDTO.from_detail(result.value).model_dump(mode="json"))

    @extend_schema(request=JobWriteSerializer, responses={201: OpenApiTypes.OBJECT})
    def create(self, request):
        """
        채용 공고 생성

        POST /api/v1/jobs/
        """
        serializer = JobWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = JobService.create_job(**serializer.validated_data)
        if isinstance(result, Err):
            return error_response(result)

        job = result.value
        return Response(
            JobDTO.from_domain(job).model_dump(mode="json"),
            status=status.HTTP_201_CREATED,
            headers={
                "Location": request.build_absolute_uri(f"/api/v1/jobs/{job.id}/")
            },
        )

    @extend_schema(request=JobWriteSerializer, responses={200: OpenApiTypes.OBJECT})
    def update(self, request, pk=None):
        """
        채용 공고 수정 (전체)

        PUT /api/v1/jobs/<id>/
        """
        serializer = JobWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = JobService.update_job(int(pk), **serializer.validated_data)
        if isinstance(result, Err):
            return error_response(result)
        return Response(JobDTO.from_domain(result.value).model_dump(mode="json"))


class JobListView(APIView):
    """
    채용 공고 목록 (검색/필터/페이지네이션)

    조회 조건이 많아 POST body 로 받습니다.
    """

    permission_classes = [AllowAny]

    @extend_schema(
        request=JobListRequestSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="List Jobs",
        description="Filter jobs by text/location/department, newest first, paginated.",
    )
    def post(self, request):
        serializer = JobListRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data

        result = JobService.list_jobs(
            query=params.get("q"),
            location_id=params.get("location_id"),
            department_id=params.get("department_id"),
            page_no=params["page_no"],
            page_size=params["page_size"],
        )
        if isinstance(result, Err):
            return error_response(result)

        page = result.value
        body = JobListResponseDTO(
            total=page.total,
            data=[JobListItemDTO.from_summary(item) for item in page.items],
        )
        return Response(body.model_dump(mode="json"))

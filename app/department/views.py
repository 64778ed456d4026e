"""
Department Views

부서 API 엔드포인트 (Thin Controller). 모든 요청에 Administrator 토큰이 필요합니다.
"""

from common.application.result import Err
from common.http import error_response
from common.permissions import IsAdministrator
from department.serializers import DepartmentSerializer
from department.services import DepartmentService
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet


class DepartmentViewSet(ViewSet):
    permission_classes = [IsAdministrator]
    lookup_value_regex = r"[0-9]+"

    @extend_schema(responses=DepartmentSerializer(many=True))
    def list(self, request):
        departments = DepartmentService.get_all_departments()
        return Response(DepartmentSerializer(departments, many=True).data)

    @extend_schema(responses=DepartmentSerializer)
    def retrieve(self, request, pk=None):
        result = DepartmentService.get_department(int(pk))
        if isinstance(result, Err):
            return error_response(result)
        return Response(DepartmentSerializer(result.value).data)

    @extend_schema(
        request=DepartmentSerializer, responses={201: DepartmentSerializer}
    )
    def create(self, request):
        """
        부서 생성

        POST /api/v1/departments/ (같은 title 이 있으면 409)
        """
        serializer = DepartmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = DepartmentService.create_department(
            title=serializer.validated_data["title"]
        )
        if isinstance(result, Err):
            return error_response(result)

        department = result.value
        return Response(
            DepartmentSerializer(department).data,
            status=status.HTTP_201_CREATED,
            headers={
                "Location": request.build_absolute_uri(
                    f"/api/v1/departments/{department.id}/"
                )
            },
        )

    @extend_schema(request=DepartmentSerializer, responses=DepartmentSerializer)
    def update(self, request, pk=None):
        """
        부서 수정

        PUT /api/v1/departments/<id>/
        """
        serializer = DepartmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = DepartmentService.update_department(
            int(pk), title=serializer.validated_data["title"]
        )
        if isinstance(result, Err):
            return error_response(result)
        return Response(DepartmentSerializer(result.value).data)

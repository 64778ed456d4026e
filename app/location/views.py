"""
Location Views

근무지 API 엔드포인트 (Thin Controller)
"""

import logging

from common.application.result import Err
from common.http import error_response
from common.permissions import IsAdministratorOrReadOnly
from drf_spectacular.utils import extend_schema
from location.serializers import LocationSerializer
from location.services import LocationService
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

logger = logging.getLogger(__name__)


class LocationViewSet(ViewSet):
    """
    근무지 ViewSet

    조회는 공개, 생성/수정은 Administrator 토큰 필요.
    """

    permission_classes = [IsAdministratorOrReadOnly]
    lookup_value_regex = r"[0-9]+"

    @extend_schema(responses=LocationSerializer(many=True))
    def list(self, request):
        """
        GET /api/v1/locations/
        """
        locations = LocationService.get_all_locations()
        return Response(LocationSerializer(locations, many=True).data)

    @extend_schema(responses=LocationSerializer)
    def retrieve(self, request, pk=None):
        """
        GET /api/v1/locations/<id>/
        """
        result = LocationService.get_location(int(pk))
        if isinstance(result, Err):
            return error_response(result)
        return Response(LocationSerializer(result.value).data)

    @extend_schema(request=LocationSerializer, responses={201: LocationSerializer})
    def create(self, request):
        """
        POST /api/v1/locations/
        """
        serializer = LocationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        location = LocationService.create_location(serializer.validated_data)
        return Response(
            LocationSerializer(location).data,
            status=status.HTTP_201_CREATED,
            headers={
                "Location": request.build_absolute_uri(
                    f"/api/v1/locations/{location.id}/"
                )
            },
        )

    @extend_schema(request=LocationSerializer, responses=LocationSerializer)
    def update(self, request, pk=None):
        """
        PUT /api/v1/locations/<id>/
        """
        serializer = LocationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = LocationService.update_location(int(pk), serializer.validated_data)
        if isinstance(result, Err):
            return error_response(result)
        return Response(LocationSerializer(result.value).data)

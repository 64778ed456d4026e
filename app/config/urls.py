"""
URL configuration for the job catalog service.

모든 API 는 /api/v1/ 아래에 있고, 목록 검색만 /api/jobs/list/ 로도 노출합니다.
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path
from django.views.decorators.http import require_http_methods
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from job.views import JobListView


@require_http_methods(["GET"])
def health_check(request):
    """헬스체크 엔드포인트"""
    return JsonResponse({"status": "healthy", "message": "Service is running"})


urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),
    # API v1 Endpoints
    path("api/v1/auth/", include("account.urls")),
    path("api/v1/", include("location.urls")),
    path("api/v1/", include("department.urls")),
    path("api/v1/", include("job.urls")),
    # 버전 없는 목록 검색 경로
    path("api/jobs/list/", JobListView.as_view(), name="job-list-search-unversioned"),
    # Health Check
    path("health/", health_check, name="health_check"),
    # API Documentation (Spectacular)
    path("api/v1/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/v1/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/v1/schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]

from department.views import DepartmentViewSet
from django.urls import include, path
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
router.register(r"departments", DepartmentViewSet, basename="department")

urlpatterns = [
    path("", include(router.urls)),
]

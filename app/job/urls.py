from django.urls import include, path
from job.views import JobListView, JobViewSet
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
router.register(r"jobs", JobViewSet, basename="job")

urlpatterns = [
    path("jobs/list/", JobListView.as_view(), name="job-list-search"),
    path("", include(router.urls)),
]

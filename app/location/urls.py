from django.urls import include, path
from location.views import LocationViewSet
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
router.register(r"locations", LocationViewSet, basename="location")

urlpatterns = [
    path("", include(router.urls)),
]

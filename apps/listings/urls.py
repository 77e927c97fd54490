"""URL routing for the listings domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import ListingViewSet

app_name = "listings"

router = DefaultRouter()
router.register(r"", ListingViewSet, basename="listing")

urlpatterns = [
    path("", include(router.urls)),
]

"""URL routing for the admin dashboard API (namespace: admin-api)."""

from django.urls import path, include  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import (
    AdminBookingViewSet,
    AdminUserViewSet,
    UserPropertyListingsView,
    UsersWithListingsView,
)

# Create router
router = DefaultRouter()

# Register viewsets
router.register(r"bookings", AdminBookingViewSet, basename="admin-booking")
router.register(r"users", AdminUserViewSet, basename="admin-user")

# URL patterns
urlpatterns = [
    path("", include(router.urls)),
    path("users-with-listings/", UsersWithListingsView.as_view(), name="users-with-listings"),
    path(
        "<int:user_id>/propertylistings/",
        UserPropertyListingsView.as_view(),
        name="user-property-listings",
    ),
]

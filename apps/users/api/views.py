"""API views for the admin dashboard."""

from __future__ import annotations

import logging

from django.db.models import Count  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.serializers import BookingSerializer
from apps.bookings.services import BookingError, delete_booking
from apps.bookings.views import booking_error_response
from apps.listings.models import Listing
from apps.listings.serializers import ListingSerializer
from apps.users.models import CustomUser

from .permissions import IsPlatformAdmin
from .serializers import AdminUserSerializer, RoleUpdateSerializer, UserWithListingsSerializer

logger = logging.getLogger(__name__)


class AdminBookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Bookings overview for platform admins.

    Endpoints:
    - GET /api/v1/admin/bookings/ - all bookings with listing and parties
    - GET /api/v1/admin/bookings/{id}/ - booking details
    - DELETE /api/v1/admin/bookings/{id}/ - delete booking
    """

    queryset = Booking.objects.select_related("listing", "customer", "host").prefetch_related("listing__photos")
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]
    lookup_value_regex = r"\d+"

    def destroy(self, request, pk=None):  # type: ignore
        try:
            delete_booking(int(pk))
        except BookingError as exc:
            return booking_error_response(exc)
        logger.info(f"Booking {pk} deleted by admin {request.user.pk}")
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminUserViewSet(
    mixins.ListModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    User management for platform admins.

    Endpoints:
    - GET /api/v1/admin/users/ - all users
    - DELETE /api/v1/admin/users/{id}/ - delete user
    - PATCH /api/v1/admin/users/{id}/role/ - set role to 'user' or 'admin'
    """

    queryset = CustomUser.objects.all()
    serializer_class = AdminUserSerializer
    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]
    lookup_value_regex = r"\d+"

    def destroy(self, request, *args, **kwargs):  # type: ignore
        user = self.get_object()
        user.delete()
        logger.info(f"User {kwargs.get('pk')} deleted by admin {request.user.pk}")
        return Response({"message": "User deleted successfully"}, status=status.HTTP_200_OK)

    @action(detail=True, methods=["patch"])
    def role(self, request, pk=None):
        """Changes the role of a user."""
        serializer = RoleUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"message": "Invalid role"}, status=status.HTTP_400_BAD_REQUEST)

        user = self.get_object()
        user.role = serializer.validated_data["role"]
        user.save(update_fields=["role", "updated_at"])
        return Response(
            {
                "message": "User role updated successfully",
                "user": AdminUserSerializer(user, context=self.get_serializer_context()).data,
            },
            status=status.HTTP_200_OK,
        )


class UsersWithListingsView(APIView):
    """Users who created at least one listing, with count and titles."""

    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]

    def get(self, request):  # type: ignore
        users = (
            CustomUser.objects.annotate(listing_count=Count("listings"))
            .filter(listing_count__gt=0)
            .prefetch_related("listings")
            .order_by("id")
        )
        return Response(UserWithListingsSerializer(users, many=True).data)


class UserPropertyListingsView(APIView):
    """Every listing of a host, approved or not."""

    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]

    def get(self, request, user_id: int):  # type: ignore
        host = get_object_or_404(CustomUser, pk=user_id)
        listings = Listing.objects.filter(creator=host).select_related("creator").prefetch_related("photos")
        return Response(ListingSerializer(listings, many=True, context={"request": request}).data)

"""User API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.serializers import BookingSerializer
from apps.listings.models import Listing
from apps.listings.serializers import ListingSerializer

from .api.permissions import IsSelfOrPlatformAdmin
from .serializers import UserSerializer, UserUpdateSerializer

User = get_user_model()


class UserViewSet(mixins.RetrieveModelMixin, mixins.UpdateModelMixin, viewsets.GenericViewSet):
    """Профиль пользователя, его поездки, брони гостей, объявления и избранное.

    Доступно самому пользователю и администраторам платформы.
    """

    queryset = User.objects.all()
    permission_classes = [IsSelfOrPlatformAdmin]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):  # type: ignore
        if self.action in {"update", "partial_update"}:
            return UserUpdateSerializer
        return UserSerializer

    def update(self, request, *args, **kwargs):  # type: ignore
        kwargs["partial"] = True
        super().update(request, *args, **kwargs)
        user = self.get_object()
        return Response(UserSerializer(user, context=self.get_serializer_context()).data)

    def _bookings_response(self, bookings):  # type: ignore
        bookings = bookings.select_related("listing", "customer", "host").prefetch_related("listing__photos")
        return Response(BookingSerializer(bookings, many=True, context=self.get_serializer_context()).data)

    @action(detail=True, methods=["get"])
    def trips(self, request, pk=None):
        """Бронирования, сделанные пользователем как гостем."""
        user = self.get_object()
        return self._bookings_response(Booking.objects.filter(customer=user))

    @action(detail=True, methods=["get"])
    def reservations(self, request, pk=None):
        """Бронирования объявлений пользователя."""
        user = self.get_object()
        return self._bookings_response(Booking.objects.filter(host=user))

    @action(detail=True, methods=["get"])
    def properties(self, request, pk=None):
        """Одобренные объявления пользователя."""
        user = self.get_object()
        listings = (
            Listing.objects.approved()
            .filter(creator=user)
            .select_related("creator")
            .prefetch_related("photos")
        )
        return Response(ListingSerializer(listings, many=True, context=self.get_serializer_context()).data)

    @action(detail=True, methods=["post"], url_path="request-deletion")
    def request_deletion(self, request, pk=None):
        user = self.get_object()
        user.request_deletion()
        return Response({"message": "Account deletion request submitted."}, status=status.HTTP_200_OK)

    @action(detail=True, methods=["patch"], url_path=r"wishlist/(?P<listing_id>\d+)")
    def wishlist(self, request, pk=None, listing_id: str | None = None):
        """Добавляет объявление в избранное или убирает его оттуда."""
        user = self.get_object()
        listing = get_object_or_404(Listing, pk=listing_id)
        added = user.toggle_wish_list(listing)
        message = "Listing is added to wish list" if added else "Listing is removed from wish list"
        wish_list = user.wish_list.select_related("creator").prefetch_related("photos")
        return Response(
            {
                "message": message,
                "wishList": ListingSerializer(wish_list, many=True, context=self.get_serializer_context()).data,
            },
            status=status.HTTP_200_OK,
        )

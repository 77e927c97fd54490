"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.api.permissions import IsPlatformAdmin, is_platform_admin

from .models import Booking
from .serializers import (
    BookedRangeSerializer,
    BookingCheckSerializer,
    BookingCreateSerializer,
    BookingSerializer,
    ListingBookingStatsSerializer,
)
from .services import (
    BookingConflictError,
    BookingError,
    BookingNotFoundError,
    BookingPersistenceError,
    BookingValidationError,
    booking_stats_per_listing,
    check_overlap,
    create_booking,
    delete_booking,
    list_booked_dates,
)


def booking_error_response(exc: BookingError, context: dict | None = None) -> Response:
    """Maps availability engine errors to API responses."""
    if isinstance(exc, BookingConflictError):
        return Response(
            {
                "message": exc.message,
                "available": False,
                "conflictingBookings": BookingSerializer(exc.conflicts, many=True, context=context or {}).data,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, BookingNotFoundError):
        return Response({"message": exc.message}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, BookingPersistenceError):
        return Response({"message": exc.message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response({"message": exc.message}, status=status.HTTP_400_BAD_REQUEST)


def invalid_input_response(serializer) -> Response:
    """400 with the engine validation message and the per-field errors."""
    return Response(
        {"message": BookingValidationError.default_message, "errors": serializer.errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


class IsBookingStakeholder(permissions.BasePermission):
    """Клиент, хозяин объявления и администраторы имеют доступ к бронированию."""

    def has_object_permission(self, request, view, obj: Booking):  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        if is_platform_admin(user):
            return True
        return user.pk in (obj.customer_id, obj.host_id)


class BookingViewSet(viewsets.GenericViewSet):
    """Viewset для проверки дат, создания и удаления бронирований."""

    queryset = Booking.objects.select_related("listing", "customer", "host").prefetch_related("listing__photos")
    serializer_class = BookingSerializer
    lookup_value_regex = r"\d+"

    def get_permissions(self):  # type: ignore
        if self.action in {"check", "booked_dates"}:
            return [permissions.AllowAny()]
        if self.action == "average_per_property":
            return [permissions.IsAuthenticated(), IsPlatformAdmin()]
        if self.action == "destroy":
            return [permissions.IsAuthenticated(), IsBookingStakeholder()]
        return [permissions.IsAuthenticated()]

    def destroy(self, request, pk=None):  # type: ignore
        booking = Booking.objects.filter(pk=pk).first()
        if booking is None:
            return Response({"message": "Booking not found"}, status=status.HTTP_404_NOT_FOUND)
        self.check_object_permissions(request, booking)
        try:
            delete_booking(booking.pk)
        except BookingError as exc:
            return booking_error_response(exc)
        return Response({"message": "Booking deleted successfully"}, status=status.HTTP_200_OK)

    @action(detail=False, methods=["post"], url_path="create", url_name="create")
    def book(self, request):
        """Создаёт бронирование в статусе ``pending``."""
        serializer = BookingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)
        data = serializer.validated_data
        try:
            booking = create_booking(
                customer_id=request.user.pk,
                host_id=None,
                listing_id=data["listing_id"],
                start_date=data["start_date"],
                end_date=data["end_date"],
                total_price=data["total_price"],
            )
        except BookingError as exc:
            return booking_error_response(exc, self.get_serializer_context())
        booking = self.get_queryset().get(pk=booking.pk)
        return Response(
            {
                "message": "Booking successfully created!",
                "booking": BookingSerializer(booking, context=self.get_serializer_context()).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"])
    def check(self, request):
        """Проверяет, свободен ли диапазон от оплаченных бронирований."""
        serializer = BookingCheckSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)
        data = serializer.validated_data
        try:
            result = check_overlap(data["listing_id"], data["start_date"], data["end_date"])
        except BookingError as exc:
            return booking_error_response(exc)

        if not result.available:
            return Response(
                {
                    "available": False,
                    "message": "The selected dates are not available because a paid booking already exists.",
                    "conflictingBookings": BookingSerializer(
                        result.conflicts, many=True, context=self.get_serializer_context()
                    ).data,
                }
            )
        return Response({"available": True, "message": "Dates are available for booking."})

    @action(detail=False, methods=["get"], url_path=r"booked-dates/(?P<listing_id>\d+)")
    def booked_dates(self, request, listing_id: str | None = None):
        """Все сохранённые диапазоны объявления для календаря."""
        try:
            ranges = list_booked_dates(int(listing_id))
        except BookingError as exc:
            return booking_error_response(exc)
        return Response({"bookedDates": BookedRangeSerializer(ranges, many=True).data})

    @action(detail=False, methods=["get"], url_path="average-per-property")
    def average_per_property(self, request):
        """Количество бронирований и их сумма по каждому объявлению."""
        try:
            stats = booking_stats_per_listing()
        except BookingError as exc:
            return booking_error_response(exc)
        if not stats:
            return Response({"message": "No bookings data available"}, status=status.HTTP_404_NOT_FOUND)
        return Response(ListingBookingStatsSerializer(stats, many=True).data)

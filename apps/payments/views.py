"""API views for Stripe Checkout payments.

Customers open a checkout session for their own booking and report the
session back after Stripe redirects them to the success page. The
payment is only recorded as completed once Stripe confirms it.
"""

from __future__ import annotations

import logging

from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.services import BookingNotFoundError
from apps.users.api.permissions import is_platform_admin

from .models import Payment
from .serializers import (
    CheckoutSessionSerializer,
    PaymentDetailsSerializer,
    PaymentSerializer,
    PaymentSuccessSerializer,
)
from .services import (
    CheckoutError,
    PaymentNotCompletedError,
    confirm_checkout_session,
    create_checkout_session,
    payment_details,
)

logger = logging.getLogger(__name__)


class PaymentViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """Viewset for checkout sessions and the payment history."""

    queryset = Payment.objects.select_related("listing", "booking", "user").all()
    serializer_class = PaymentSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if is_platform_admin(self.request.user):
            return qs
        return qs.filter(user=self.request.user)

    @action(detail=False, methods=["post"], url_path="create-checkout-session")
    def checkout_session(self, request):
        """Открывает Stripe Checkout для собственного бронирования."""
        serializer = CheckoutSessionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_object_or_404(Booking, pk=serializer.validated_data["booking_id"])

        if booking.customer_id != request.user.pk and not is_platform_admin(request.user):
            return Response(
                {"error": "You can only pay for your own bookings."},
                status=status.HTTP_403_FORBIDDEN,
            )
        if booking.is_paid:
            return Response({"error": "Booking is already paid."}, status=status.HTTP_400_BAD_REQUEST)

        try:
            session_id = create_checkout_session(booking)
        except CheckoutError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)
        return Response({"id": session_id}, status=status.HTTP_200_OK)

    @action(detail=False, methods=["post"], url_path="payment-success")
    def payment_success(self, request):
        """Подтверждает оплату по id сессии Stripe."""
        serializer = PaymentSuccessSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payment = confirm_checkout_session(serializer.validated_data["session_id"])
        except CheckoutError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)
        except PaymentNotCompletedError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except BookingNotFoundError:
            return Response({"error": "Booking not found."}, status=status.HTTP_404_NOT_FOUND)

        return Response(
            {
                "message": "Payment successful and booking status updated.",
                "paymentDetails": PaymentDetailsSerializer(payment_details(payment)).data,
            },
            status=status.HTTP_200_OK,
        )

"""API tests for Stripe Checkout payments."""

from __future__ import annotations

from datetime import date
from unittest import mock

import stripe  # type: ignore
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.bookings.services import create_booking
from apps.payments.models import Payment
from shared.testing import make_listing, make_user

SESSION_CREATE = "apps.payments.services.stripe.checkout.Session.create"
SESSION_RETRIEVE = "apps.payments.services.stripe.checkout.Session.retrieve"


class CheckoutSessionAPITests(APITestCase):
    def setUp(self) -> None:
        self.host = make_user(first_name="Ravi", last_name="Host")
        self.guest = make_user()
        self.listing = make_listing(self.host, title="Reef bungalow")
        self.booking = create_booking(
            self.guest.pk, None, self.listing.pk, date(2024, 7, 1), date(2024, 7, 3), "240.50"
        )
        self.client.force_authenticate(self.guest)
        self.url = reverse("payments:payment-checkout-session")

    @mock.patch(SESSION_CREATE)
    def test_checkout_session_for_own_booking(self, create) -> None:
        create.return_value = mock.MagicMock(id="cs_test_123")

        response = self.client.post(self.url, {"booking_id": self.booking.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {"id": "cs_test_123"})

        kwargs = create.call_args.kwargs
        self.assertEqual(kwargs["client_reference_id"], str(self.booking.id))
        self.assertEqual(kwargs["mode"], "payment")
        self.assertEqual(kwargs["line_items"][0]["price_data"]["unit_amount"], 24050)

        payment = Payment.objects.get(checkout_session_id="cs_test_123")
        self.assertEqual(payment.status, Payment.Status.PENDING)
        self.assertEqual(payment.booking, self.booking)

    @mock.patch(SESSION_CREATE)
    def test_cannot_pay_for_someone_elses_booking(self, create) -> None:
        self.client.force_authenticate(make_user())

        response = self.client.post(self.url, {"booking_id": self.booking.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        create.assert_not_called()

    @mock.patch(SESSION_CREATE)
    def test_stripe_failure_returns_502(self, create) -> None:
        create.side_effect = stripe.StripeError("Stripe is down")

        response = self.client.post(self.url, {"booking_id": self.booking.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertFalse(Payment.objects.exists())

    def test_unknown_booking_returns_404(self) -> None:
        response = self.client.post(self.url, {"booking_id": 424242}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_requires_authentication(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.post(self.url, {"booking_id": self.booking.id}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class PaymentSuccessAPITests(APITestCase):
    def setUp(self) -> None:
        self.host = make_user(first_name="Ravi", last_name="Host")
        self.guest = make_user()
        self.listing = make_listing(self.host, title="Reef bungalow")
        self.booking = create_booking(
            self.guest.pk, None, self.listing.pk, date(2024, 7, 1), date(2024, 7, 3), "240.50"
        )
        self.client.force_authenticate(self.guest)
        self.url = reverse("payments:payment-payment-success")

    def _session(self, payment_status: str = "paid", reference: str | None = None):  # type: ignore
        return mock.MagicMock(
            id="cs_test_123",
            payment_status=payment_status,
            client_reference_id=reference if reference is not None else str(self.booking.id),
        )

    @mock.patch(SESSION_RETRIEVE)
    def test_paid_session_marks_booking_paid(self, retrieve) -> None:
        retrieve.return_value = self._session()

        response = self.client.post(self.url, {"session_id": "cs_test_123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Payment successful and booking status updated.")
        details = response.data["paymentDetails"]
        self.assertEqual(details["listingTitle"], "Reef bungalow")
        self.assertEqual(details["userName"], "Ravi Host")
        self.assertEqual(details["pricePaid"], "240.50")

        self.booking.refresh_from_db()
        self.assertEqual(self.booking.payment_status, Booking.PaymentStatus.PAID)
        payment = Payment.objects.get(checkout_session_id="cs_test_123")
        self.assertEqual(payment.status, Payment.Status.COMPLETED)

    @mock.patch(SESSION_RETRIEVE)
    def test_confirming_twice_keeps_one_payment(self, retrieve) -> None:
        retrieve.return_value = self._session()

        self.client.post(self.url, {"session_id": "cs_test_123"}, format="json")
        response = self.client.post(self.url, {"session_id": "cs_test_123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Payment.objects.count(), 1)

    @mock.patch(SESSION_RETRIEVE)
    def test_unpaid_session_is_rejected(self, retrieve) -> None:
        retrieve.return_value = self._session(payment_status="unpaid")

        response = self.client.post(self.url, {"session_id": "cs_test_123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.payment_status, Booking.PaymentStatus.PENDING)

    @mock.patch(SESSION_RETRIEVE)
    def test_session_for_deleted_booking_returns_404(self, retrieve) -> None:
        retrieve.return_value = self._session(reference="999999")

        response = self.client.post(self.url, {"session_id": "cs_test_123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Payment.objects.exists())

    @mock.patch(SESSION_RETRIEVE)
    def test_stripe_lookup_failure_returns_502(self, retrieve) -> None:
        retrieve.side_effect = stripe.StripeError("No such checkout session")

        response = self.client.post(self.url, {"session_id": "cs_missing"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)


class PaymentHistoryAPITests(APITestCase):
    def test_users_only_see_their_own_payments(self) -> None:
        guest = make_user()
        other = make_user()
        listing = make_listing(make_user())
        own = Payment.objects.create(user=guest, listing=listing, price_paid="100.00")
        Payment.objects.create(user=other, listing=listing, price_paid="50.00")
        self.client.force_authenticate(guest)

        response = self.client.get(reverse("payments:payment-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["id"] for p in response.data], [own.id])

"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.bookings.services import create_booking, mark_paid
from shared.testing import make_admin, make_listing, make_user


class BookingAPITests(APITestCase):
    """Covers creation, conflicts, availability checks and deletion."""

    def setUp(self) -> None:
        self.host = make_user(first_name="Hana", last_name="Host")
        self.guest = make_user(first_name="Gina", last_name="Guest")
        self.listing = make_listing(self.host)
        self.client.force_authenticate(self.guest)
        self.create_url = reverse("bookings:booking-create")
        self.check_url = reverse("bookings:booking-check")

    def _payload(self, start: str, end: str, price: str = "480.00") -> dict[str, str | int]:
        return {
            "listing_id": self.listing.id,
            "start_date": start,
            "end_date": end,
            "total_price": price,
        }

    def _existing(self, start: date, end: date, paid: bool = False) -> Booking:
        booking = create_booking(self.host.pk, None, self.listing.pk, start, end, "100")
        if paid:
            booking = mark_paid(booking.pk)
        return booking

    def test_guest_can_create_booking(self) -> None:
        response = self.client.post(self.create_url, self._payload("2024-03-01", "2024-03-05"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Booking successfully created!")
        self.assertEqual(response.data["booking"]["payment_status"], "pending")
        self.assertEqual(response.data["booking"]["listing"]["id"], self.listing.id)
        self.assertEqual(response.data["booking"]["nights"], 4)

        booking = Booking.objects.get()
        self.assertEqual(booking.customer, self.guest)
        self.assertEqual(booking.host, self.host)
        self.assertEqual(booking.start_date, datetime(2024, 3, 1, tzinfo=timezone.utc))
        self.assertEqual(booking.total_price, Decimal("480.00"))

    def test_anonymous_user_cannot_book(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.post(self.create_url, self._payload("2024-03-01", "2024-03-05"), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_overlap_is_rejected_with_conflicting_bookings(self) -> None:
        existing = self._existing(date(2024, 3, 1), date(2024, 3, 5))

        response = self.client.post(self.create_url, self._payload("2024-03-04", "2024-03-08"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertFalse(response.data["available"])
        self.assertEqual(
            response.data["message"], "The selected dates are not available for this property."
        )
        self.assertEqual([b["id"] for b in response.data["conflictingBookings"]], [existing.id])
        self.assertEqual(Booking.objects.count(), 1)

    def test_back_to_back_bookings_are_allowed(self) -> None:
        self._existing(date(2024, 3, 1), date(2024, 3, 5), paid=True)

        response = self.client.post(self.create_url, self._payload("2024-03-05", "2024-03-07"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(Booking.objects.count(), 2)

    def test_invalid_range_is_rejected(self) -> None:
        response = self.client.post(self.create_url, self._payload("2024-03-05", "2024-03-01"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid booking data.")
        self.assertIn("end_date", response.data["errors"])

        response = self.client.post(self.create_url, self._payload("yesterday", "2024-03-01"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("start_date", response.data["errors"])

        response = self.client.post(
            self.create_url, self._payload("2024-03-01", "2024-03-05", price="-5"), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Booking.objects.count(), 0)

    def test_booking_unknown_listing_returns_404(self) -> None:
        payload = self._payload("2024-03-01", "2024-03-05")
        payload["listing_id"] = 987654
        response = self.client.post(self.create_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_check_reports_paid_conflicts(self) -> None:
        paid = self._existing(date(2024, 3, 1), date(2024, 3, 5), paid=True)
        payload = {"listing_id": self.listing.id, "start_date": "2024-03-03", "end_date": "2024-03-04"}

        response = self.client.post(self.check_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertFalse(response.data["available"])
        self.assertEqual([b["id"] for b in response.data["conflictingBookings"]], [paid.id])

    def test_check_ignores_pending_bookings(self) -> None:
        self._existing(date(2024, 3, 1), date(2024, 3, 5))
        payload = {"listing_id": self.listing.id, "start_date": "2024-03-01", "end_date": "2024-03-05"}

        response = self.client.post(self.check_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["available"])
        self.assertEqual(response.data["message"], "Dates are available for booking.")
        self.assertNotIn("conflictingBookings", response.data)

    def test_check_is_open_to_anonymous_users(self) -> None:
        self.client.force_authenticate(None)
        payload = {"listing_id": self.listing.id, "start_date": "2024-03-01", "end_date": "2024-03-05"}
        response = self.client.post(self.check_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_booked_dates_lists_every_range(self) -> None:
        self._existing(date(2024, 3, 1), date(2024, 3, 5), paid=True)
        self._existing(date(2024, 3, 10), date(2024, 3, 12))

        response = self.client.get(reverse("bookings:booking-booked-dates", args=[self.listing.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["bookedDates"]), 2)
        self.assertEqual(response.data["bookedDates"][0]["start_date"], "2024-03-01T00:00:00Z")

    def test_customer_can_delete_booking_once(self) -> None:
        booking = create_booking(self.guest.pk, None, self.listing.pk, "2024-03-01", "2024-03-05", "100")
        url = reverse("bookings:booking-detail", args=[booking.id])

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Booking deleted successfully")

        second = self.client.delete(url)
        self.assertEqual(second.status_code, status.HTTP_404_NOT_FOUND)

    def test_stranger_cannot_delete_booking(self) -> None:
        booking = self._existing(date(2024, 3, 1), date(2024, 3, 5))
        self.client.force_authenticate(make_user())

        response = self.client.delete(reverse("bookings:booking-detail", args=[booking.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Booking.objects.filter(pk=booking.pk).exists())

    def test_stats_are_admin_only(self) -> None:
        self._existing(date(2024, 3, 1), date(2024, 3, 5))
        url = reverse("bookings:booking-average-per-property")

        self.assertEqual(self.client.get(url).status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(make_admin())
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["total_bookings"], 1)
        self.assertEqual(response.data[0]["title"], self.listing.title)

    def test_stats_without_bookings_returns_404(self) -> None:
        self.client.force_authenticate(make_admin())
        response = self.client.get(reverse("bookings:booking-average-per-property"))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_check_with_reversed_range_returns_message(self) -> None:
        payload = {"listing_id": self.listing.id, "start_date": "2024-03-05", "end_date": "2024-03-05"}

        response = self.client.post(self.check_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid booking data.")
        self.assertIn("end_date", response.data["errors"])

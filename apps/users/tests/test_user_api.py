"""API tests for user profile endpoints."""

from __future__ import annotations

from datetime import date

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.services import create_booking
from shared.testing import make_admin, make_listing, make_user


class UserProfileAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = make_user(first_name="Amir", last_name="Ramdin")
        self.client.force_authenticate(self.user)

    def test_user_can_read_own_profile(self) -> None:
        response = self.client.get(reverse("users:user-detail", args=[self.user.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["email"], self.user.email)

    def test_user_can_update_profile_partially(self) -> None:
        response = self.client.put(
            reverse("users:user-detail", args=[self.user.id]), {"first_name": "Amira"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["first_name"], "Amira")
        self.assertEqual(response.data["last_name"], "Ramdin")

    def test_role_cannot_be_changed_through_profile(self) -> None:
        self.client.patch(
            reverse("users:user-detail", args=[self.user.id]), {"role": "admin"}, format="json"
        )
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, "user")

    def test_other_users_profile_is_forbidden(self) -> None:
        other = make_user()
        response = self.client.patch(
            reverse("users:user-detail", args=[other.id]), {"first_name": "Hacked"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_can_read_any_profile(self) -> None:
        self.client.force_authenticate(make_admin())
        response = self.client.get(reverse("users:user-detail", args=[self.user.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_request_deletion_flags_account(self) -> None:
        response = self.client.post(reverse("users:user-request-deletion", args=[self.user.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.deletion_requested)


class UserBookingsAPITests(APITestCase):
    def setUp(self) -> None:
        self.host = make_user()
        self.guest = make_user()
        self.listing = make_listing(self.host)
        self.booking = create_booking(
            self.guest.pk, None, self.listing.pk, date(2024, 5, 1), date(2024, 5, 4), "360"
        )

    def test_trips_list_customer_bookings(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.get(reverse("users:user-trips", args=[self.guest.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([b["id"] for b in response.data], [self.booking.id])
        self.assertEqual(response.data[0]["listing"]["title"], self.listing.title)

    def test_reservations_list_host_bookings(self) -> None:
        self.client.force_authenticate(self.host)

        response = self.client.get(reverse("users:user-reservations", args=[self.host.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([b["id"] for b in response.data], [self.booking.id])

        trips = self.client.get(reverse("users:user-trips", args=[self.host.id]))
        self.assertEqual(trips.data, [])

    def test_properties_list_only_approved_listings(self) -> None:
        make_listing(self.host, title="Awaiting review", is_approved=False)
        self.client.force_authenticate(self.host)

        response = self.client.get(reverse("users:user-properties", args=[self.host.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data], [self.listing.id])


class WishListAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = make_user()
        self.listing = make_listing(make_user())
        self.client.force_authenticate(self.user)
        self.url = reverse("users:user-wishlist", args=[self.user.id, self.listing.id])

    def test_toggle_adds_then_removes(self) -> None:
        added = self.client.patch(self.url)
        self.assertEqual(added.status_code, status.HTTP_200_OK)
        self.assertEqual(added.data["message"], "Listing is added to wish list")
        self.assertEqual([item["id"] for item in added.data["wishList"]], [self.listing.id])

        removed = self.client.patch(self.url)
        self.assertEqual(removed.data["message"], "Listing is removed from wish list")
        self.assertEqual(removed.data["wishList"], [])
        self.assertFalse(self.user.wish_list.exists())

    def test_unknown_listing_returns_404(self) -> None:
        response = self.client.patch(reverse("users:user-wishlist", args=[self.user.id, 99999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

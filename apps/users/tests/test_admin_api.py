"""API tests for the admin dashboard endpoints."""

from __future__ import annotations

from datetime import date

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.bookings.services import create_booking
from apps.users.models import User
from shared.testing import make_admin, make_listing, make_user


class AdminAccessTests(APITestCase):
    def test_regular_user_is_forbidden(self) -> None:
        self.client.force_authenticate(make_user())
        for name in ("admin-api:admin-booking-list", "admin-api:admin-user-list", "admin-api:users-with-listings"):
            response = self.client.get(reverse(name))
            self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, name)

    def test_anonymous_user_is_rejected(self) -> None:
        response = self.client.get(reverse("admin-api:admin-user-list"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class AdminBookingAPITests(APITestCase):
    def setUp(self) -> None:
        self.client.force_authenticate(make_admin())
        self.host = make_user()
        self.listing = make_listing(self.host)
        self.booking = create_booking(
            make_user().pk, None, self.listing.pk, date(2024, 6, 1), date(2024, 6, 3), "240"
        )

    def test_list_all_bookings(self) -> None:
        response = self.client.get(reverse("admin-api:admin-booking-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([b["id"] for b in response.data], [self.booking.id])

    def test_delete_booking(self) -> None:
        url = reverse("admin-api:admin-booking-detail", args=[self.booking.id])

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Booking.objects.exists())

        missing = self.client.delete(url)
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(missing.data["message"], "Booking not found")


class AdminUserAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = make_admin()
        self.client.force_authenticate(self.admin)
        self.user = make_user()

    def test_change_role(self) -> None:
        response = self.client.patch(
            reverse("admin-api:admin-user-role", args=[self.user.id]), {"role": "admin"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["user"]["role"], "admin")
        self.user.refresh_from_db()
        self.assertTrue(self.user.is_admin())

    def test_invalid_role_is_rejected(self) -> None:
        response = self.client.patch(
            reverse("admin-api:admin-user-role", args=[self.user.id]), {"role": "superhero"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "Invalid role"})

    def test_delete_user(self) -> None:
        response = self.client.delete(reverse("admin-api:admin-user-detail", args=[self.user.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "User deleted successfully")
        self.assertFalse(User.objects.filter(pk=self.user.pk).exists())

    def test_users_with_listings(self) -> None:
        make_listing(self.user, title="Sea view studio")
        make_listing(self.user, title="Mountain cabin", is_approved=False)

        response = self.client.get(reverse("admin-api:users-with-listings"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["id"], self.user.id)
        self.assertEqual(response.data[0]["listing_count"], 2)
        self.assertCountEqual(response.data[0]["listing_titles"], ["Sea view studio", "Mountain cabin"])

    def test_property_listings_include_unapproved(self) -> None:
        make_listing(self.user, is_approved=False)

        response = self.client.get(reverse("admin-api:user-property-listings", args=[self.user.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

"""Object builders shared by the API test suites."""

from __future__ import annotations

import io
from decimal import Decimal
from itertools import count

from django.core.files.uploadedfile import SimpleUploadedFile  # type: ignore
from PIL import Image  # type: ignore

_sequence = count(1)


def png_file(name: str = "photo.png") -> SimpleUploadedFile:
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2), color=(200, 120, 40)).save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")


def make_user(**extra):  # type: ignore
    from apps.users.models import User

    n = next(_sequence)
    extra.setdefault("email", f"user{n}@example.com")
    extra.setdefault("first_name", "Test")
    extra.setdefault("last_name", f"User{n}")
    password = extra.pop("password", "StrongPass123")
    return User.objects.create_user(password=password, **extra)


def make_admin(**extra):  # type: ignore
    from apps.users.models import User

    extra.setdefault("role", User.RoleChoices.ADMIN)
    return make_user(**extra)


def make_listing(creator, **extra):  # type: ignore
    from apps.listings.models import Listing

    defaults = {
        "category": "Beachfront",
        "type": "An entire place",
        "street_address": "12 Coastal Road",
        "city": "Grand Baie",
        "province": "Riviere du Rempart",
        "country": "Mauritius",
        "guest_count": 4,
        "bedroom_count": 2,
        "bed_count": 2,
        "bathroom_count": 1,
        "amenities": ["Wifi", "Kitchen"],
        "title": "Villa by the lagoon",
        "description": "Quiet villa a short walk from the beach.",
        "price": Decimal("120.00"),
        "is_approved": True,
    }
    defaults.update(extra)
    return Listing.objects.create(creator=creator, **defaults)

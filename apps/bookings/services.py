"""Booking availability engine.

Two overlap rules are in play. ``check_overlap`` compares closed intervals
and only paid bookings make a range unavailable. ``create_booking`` compares
half-open intervals and any stored booking, paid or not, blocks creation.
Back-to-back stays (one ending when the next starts) can therefore be
created, while ``check_overlap`` reports them as touching.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterator

from django.db import DatabaseError, transaction  # type: ignore
from django.db.models import Count, F, Sum  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils.dateparse import parse_date, parse_datetime  # type: ignore

from shared.domain.value_objects import DateRange, to_instant

from .models import Booking

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base class for availability engine errors."""

    default_message = "Booking operation failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BookingValidationError(BookingError):
    """Raised for missing or malformed booking input."""

    default_message = "Invalid booking data."


class BookingConflictError(BookingError):
    """Raised when the requested range collides with stored bookings."""

    default_message = "The selected dates are not available for this property."

    def __init__(self, conflicts: list[Booking], message: str | None = None):
        self.conflicts = conflicts
        super().__init__(message)


class BookingNotFoundError(BookingError):
    """Raised when the referenced booking or listing does not exist."""

    default_message = "Booking not found"


class BookingPersistenceError(BookingError):
    """Raised when the database fails during an engine operation."""

    default_message = "Booking storage is unavailable."


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    conflicts: list[Booking] = field(default_factory=list)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.error(f"Database failure during {operation}: {exc}", exc_info=True)
        raise BookingPersistenceError() from exc


def _coerce_instant(value: Any, field_name: str) -> datetime:
    """Reads a date, datetime or ISO string as an aware instant."""
    if value is None or value == "":
        raise BookingValidationError(f"{field_name} is required.")

    if isinstance(value, str):
        raw = value.strip()
        try:
            parsed: date | datetime | None = parse_datetime(raw) or parse_date(raw)
        except ValueError:
            parsed = None
        if parsed is None:
            raise BookingValidationError(f"{field_name} is not a valid date.")
        value = parsed

    try:
        return to_instant(value)
    except TypeError:
        raise BookingValidationError(f"{field_name} is not a valid date.")


def _coerce_range(start_date: Any, end_date: Any) -> DateRange:
    start = _coerce_instant(start_date, "start_date")
    end = _coerce_instant(end_date, "end_date")
    try:
        return DateRange(start, end)
    except ValueError:
        raise BookingValidationError("start_date must be before end_date.")


def _coerce_price(total_price: Any) -> Decimal:
    if total_price is None or total_price == "":
        raise BookingValidationError("total_price is required.")
    try:
        price = Decimal(str(total_price))
    except InvalidOperation:
        raise BookingValidationError("total_price must be a number.")
    if not price.is_finite() or price < 0:
        raise BookingValidationError("total_price must not be negative.")
    return price


def check_overlap(listing_id: int, start_date: Any, end_date: Any) -> AvailabilityResult:
    """
    Reports whether a range is free of paid bookings.

    Stored bookings overlap the request when ``s <= E and e >= S``. Only paid
    overlaps make the range unavailable; they are returned as conflicts.
    ``start_date < end_date`` is not enforced here.
    """
    start = _coerce_instant(start_date, "start_date")
    end = _coerce_instant(end_date, "end_date")

    with _storage_errors("check_overlap"):
        overlapping = list(
            Booking.objects.filter(
                listing_id=listing_id,
                start_date__lte=end,
                end_date__gte=start,
            ).order_by("start_date")
        )

    paid = [booking for booking in overlapping if booking.is_paid]
    if paid:
        return AvailabilityResult(available=False, conflicts=paid)
    return AvailabilityResult(available=True)


def create_booking(
    customer_id: int | None,
    host_id: int | None,
    listing_id: int,
    start_date: Any,
    end_date: Any,
    total_price: Any,
) -> Booking:
    """
    Persists a pending booking unless the range collides with a stored one.

    Any booking with ``s < E and e > S`` blocks creation regardless of its
    payment status. The listing row is locked for the whole read-check-write
    so concurrent requests for one listing run one after another. When
    ``host_id`` is None the listing creator becomes the host.
    """
    if listing_id in (None, ""):
        raise BookingValidationError("listing_id is required.")
    requested = _coerce_range(start_date, end_date)
    price = _coerce_price(total_price)

    from apps.listings.models import Listing  # Local import to prevent circular dependency

    with _storage_errors("create_booking"), transaction.atomic():
        listing = _lock_queryset_if_possible(Listing.objects.filter(pk=listing_id)).first()
        if listing is None:
            raise BookingNotFoundError("Listing not found")

        conflicts = list(
            Booking.objects.filter(
                listing_id=listing.pk,
                start_date__lt=requested.end,
                end_date__gt=requested.start,
            ).order_by("start_date")
        )
        if conflicts:
            logger.info(
                f"Booking rejected for listing {listing.pk} ({requested}): "
                f"{len(conflicts)} conflicting booking(s)"
            )
            raise BookingConflictError(conflicts)

        booking = Booking.objects.create(
            listing=listing,
            customer_id=customer_id,
            host_id=host_id if host_id is not None else listing.creator_id,
            start_date=requested.start,
            end_date=requested.end,
            total_price=price,
            payment_status=Booking.PaymentStatus.PENDING,
        )

    logger.info(f"Booking {booking.pk} created for listing {listing.pk} ({requested})")
    return booking


def mark_paid(booking_id: int) -> Booking:
    """Sets the booking as paid. Overlaps are not re-validated."""
    with _storage_errors("mark_paid"), transaction.atomic():
        booking = _lock_queryset_if_possible(Booking.objects.filter(pk=booking_id)).first()
        if booking is None:
            raise BookingNotFoundError()
        booking.payment_status = Booking.PaymentStatus.PAID
        booking.save(update_fields=["payment_status", "updated_at"])

    logger.info(f"Booking {booking.pk} marked as paid")
    return booking


def delete_booking(booking_id: int) -> None:
    """Deletes a booking whatever its payment status; a second call fails."""
    with _storage_errors("delete_booking"):
        deleted, _ = Booking.objects.filter(pk=booking_id).delete()
    if not deleted:
        raise BookingNotFoundError()
    logger.info(f"Booking {booking_id} deleted")


def list_booked_dates(listing_id: int) -> list[dict[str, datetime]]:
    """Every stored range of the listing, paid or not, without merging."""
    with _storage_errors("list_booked_dates"):
        return list(
            Booking.objects.filter(listing_id=listing_id)
            .order_by("start_date")
            .values("start_date", "end_date")
        )


def booking_stats_per_listing() -> list[dict[str, Any]]:
    """Booking count and summed total price per listing, with its title."""
    with _storage_errors("booking_stats_per_listing"):
        return list(
            Booking.objects.values("listing_id", title=F("listing__title"))
            .annotate(total_bookings=Count("id"), sum_booking_amount=Sum("total_price"))
            .order_by("listing_id")
        )

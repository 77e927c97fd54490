"""Serializers for the booking domain."""

from __future__ import annotations

from django.utils.dateparse import parse_date  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.listings.serializers import ListingSummarySerializer
from apps.users.serializers import UserShortSerializer
from shared.domain.value_objects import to_instant

from .models import Booking


class InstantField(serializers.DateTimeField):
    """DateTimeField that also accepts plain dates (midnight UTC)."""

    def to_internal_value(self, value):  # type: ignore
        if isinstance(value, str):
            try:
                day = parse_date(value.strip())
            except ValueError:
                self.fail("invalid", format="YYYY-MM-DD or ISO 8601")
            if day is not None:
                return to_instant(day)
        return super().to_internal_value(value)


class DateRangeSerializer(serializers.Serializer):
    listing_id = serializers.IntegerField(min_value=1)
    start_date = InstantField()
    end_date = InstantField()

    def validate(self, attrs):  # type: ignore
        if attrs["start_date"] >= attrs["end_date"]:
            raise serializers.ValidationError({"end_date": "End date must be after start date."})
        return attrs


class BookingCheckSerializer(DateRangeSerializer):
    """Input of the availability check."""


class BookingCreateSerializer(DateRangeSerializer):
    """Input of a booking request; the customer is the requesting user."""

    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class BookingSerializer(serializers.ModelSerializer):
    """Booking with its listing and both parties."""

    listing = ListingSummarySerializer(read_only=True)
    customer = UserShortSerializer(read_only=True)
    host = UserShortSerializer(read_only=True)
    nights = serializers.IntegerField(source="date_range.nights", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "listing",
            "customer",
            "host",
            "start_date",
            "end_date",
            "nights",
            "total_price",
            "payment_status",
            "deletion_requested",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BookedRangeSerializer(serializers.Serializer):
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()


class ListingBookingStatsSerializer(serializers.Serializer):
    listing_id = serializers.IntegerField()
    title = serializers.CharField()
    total_bookings = serializers.IntegerField()
    sum_booking_amount = serializers.DecimalField(max_digits=14, decimal_places=2)

"""Serializers for payments."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Payment


class PaymentSerializer(serializers.ModelSerializer):
    """Read-only representation of a payment."""

    listing_title = serializers.ReadOnlyField(source="listing.title")

    class Meta:
        model = Payment
        fields = [
            "id",
            "user",
            "listing",
            "listing_title",
            "booking",
            "price_paid",
            "payment_date",
            "status",
            "created_at",
        ]
        read_only_fields = fields


class CheckoutSessionSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField(min_value=1)


class PaymentSuccessSerializer(serializers.Serializer):
    session_id = serializers.CharField(max_length=255)


class PaymentDetailsSerializer(serializers.Serializer):
    listingTitle = serializers.CharField(allow_null=True)
    userName = serializers.CharField(allow_null=True)
    pricePaid = serializers.DecimalField(max_digits=12, decimal_places=2)
    paymentDate = serializers.DateTimeField()

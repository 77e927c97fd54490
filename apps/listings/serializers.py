"""Serializers for the listings domain."""

from __future__ import annotations

import json

from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore
from rest_framework.fields import empty  # type: ignore

from apps.users.serializers import UserShortSerializer

from .models import Listing, ListingPhoto


class ListingPhotoSerializer(serializers.ModelSerializer):
    class Meta:
        model = ListingPhoto
        fields = ["id", "image", "order", "uploaded_at"]
        read_only_fields = ["uploaded_at"]


class ListingSerializer(serializers.ModelSerializer):
    creator = UserShortSerializer(read_only=True)
    photos = ListingPhotoSerializer(many=True, read_only=True)

    class Meta:
        model = Listing
        fields = [
            "id",
            "creator",
            "category",
            "type",
            "street_address",
            "apt_suite",
            "city",
            "province",
            "country",
            "guest_count",
            "bedroom_count",
            "bed_count",
            "bathroom_count",
            "amenities",
            "photos",
            "title",
            "description",
            "highlight",
            "highlight_desc",
            "price",
            "property_proof",
            "is_approved",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ListingSummarySerializer(serializers.ModelSerializer):
    """Compact listing representation embedded in bookings and payments."""

    photos = ListingPhotoSerializer(many=True, read_only=True)

    class Meta:
        model = Listing
        fields = ["id", "title", "city", "province", "country", "category", "type", "price", "photos"]


class AmenitiesField(serializers.ListField):
    """Accepts a JSON list, a JSON-encoded string or repeated form values."""

    child = serializers.CharField(max_length=100)

    def to_internal_value(self, data):  # type: ignore
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except ValueError:
                data = [item.strip() for item in data.split(",") if item.strip()]
        return super().to_internal_value(data)

    def get_value(self, dictionary):  # type: ignore
        if hasattr(dictionary, "getlist"):
            if self.field_name not in dictionary:
                return empty
            values = dictionary.getlist(self.field_name)
            return values[0] if len(values) == 1 else values
        return super().get_value(dictionary)


class ListingWriteSerializer(serializers.ModelSerializer):
    amenities = AmenitiesField(required=False)
    listing_photos = serializers.ListField(
        child=serializers.ImageField(),
        write_only=True,
        required=False,
        max_length=10,
    )

    class Meta:
        model = Listing
        fields = [
            "id",
            "category",
            "type",
            "street_address",
            "apt_suite",
            "city",
            "province",
            "country",
            "guest_count",
            "bedroom_count",
            "bed_count",
            "bathroom_count",
            "amenities",
            "listing_photos",
            "title",
            "description",
            "highlight",
            "highlight_desc",
            "price",
            "property_proof",
        ]
        read_only_fields = ["id"]

    def validate_price(self, value):  # type: ignore
        if value < 0:
            raise serializers.ValidationError("Price must not be negative.")
        return value

    @transaction.atomic
    def create(self, validated_data):  # type: ignore
        photos = validated_data.pop("listing_photos", [])
        listing = Listing.objects.create(**validated_data)
        for order, image in enumerate(photos):
            ListingPhoto.objects.create(listing=listing, image=image, order=order)
        return listing

    def to_representation(self, instance):  # type: ignore
        return ListingSerializer(instance, context=self.context).data

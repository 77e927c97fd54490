"""Serializers for the admin dashboard API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.models import CustomUser


class AdminUserSerializer(serializers.ModelSerializer):
    """User row of the admin dashboard."""

    role_display = serializers.CharField(source="get_role_display", read_only=True)

    class Meta:
        model = CustomUser
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "profile_image",
            "role",
            "role_display",
            "is_online",
            "deletion_requested",
            "is_active",
            "created_at",
        ]
        read_only_fields = fields


class RoleUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(
        choices=CustomUser.RoleChoices.choices,
        error_messages={
            "invalid_choice": "Invalid role",
            "required": "Invalid role",
            "null": "Invalid role",
            "blank": "Invalid role",
        },
    )


class UserWithListingsSerializer(serializers.ModelSerializer):
    """Host summary: number of listings and their titles."""

    listing_count = serializers.IntegerField(read_only=True)
    listing_titles = serializers.SerializerMethodField()

    class Meta:
        model = CustomUser
        fields = [
            "id",
            "first_name",
            "last_name",
            "email",
            "role",
            "listing_count",
            "listing_titles",
        ]

    def get_listing_titles(self, obj: CustomUser) -> list[str]:
        return [listing.title for listing in obj.listings.all()]

"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserShortSerializer(serializers.ModelSerializer):
    """Name and contact of a user embedded in other payloads."""

    class Meta:
        model = User
        fields = ["id", "first_name", "last_name", "email", "profile_image"]


class UserSerializer(serializers.ModelSerializer):
    """Main user serializer."""

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "profile_image",
            "role",
            "is_online",
            "deletion_requested",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "role",
            "is_online",
            "deletion_requested",
            "created_at",
            "updated_at",
        ]


class UserUpdateSerializer(serializers.ModelSerializer):
    """Profile update; a new image is optional."""

    profile_image = serializers.ImageField(required=False)

    class Meta:
        model = User
        fields = ["first_name", "last_name", "email", "profile_image"]
        extra_kwargs = {
            "first_name": {"required": False},
            "last_name": {"required": False},
            "email": {"required": False},
        }

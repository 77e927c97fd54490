"""Serializers for authentication flows (register, login, password reset)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import serializers, status  # type: ignore
from rest_framework.exceptions import APIException  # type: ignore

from .models import PasswordResetToken


User = get_user_model()


class UserConflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "User already exists!"
    default_code = "user_conflict"


class RegisterSerializer(serializers.Serializer):
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, write_only=True)
    profile_image = serializers.ImageField()

    def validate_email(self, value: str) -> str:
        if User.objects.filter(email__iexact=value).exists():
            raise UserConflict()
        return value

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        try:
            user = User.objects.get(email__iexact=attrs["email"])
        except User.DoesNotExist:
            raise UserConflict("User doesn't exist!")

        if not user.check_password(attrs["password"]):
            raise serializers.ValidationError({"non_field_errors": ["Invalid Credentials!"]})

        attrs["user"] = user
        return attrs


class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        try:
            attrs["user"] = User.objects.get(email__iexact=attrs["email"])
        except User.DoesNotExist:
            raise serializers.ValidationError({"email": "User not found!"})
        return attrs

    def create(self, validated_data: dict[str, Any]):  # type: ignore
        return PasswordResetToken.issue_for(validated_data["user"])


class ResetPasswordSerializer(serializers.Serializer):
    password = serializers.CharField(min_length=8, write_only=True)

    @transaction.atomic
    def save(self, token: PasswordResetToken):  # type: ignore
        user = token.user
        user.set_password(self.validated_data["password"])
        user.save(update_fields=["password"])
        token.mark_used()
        return user

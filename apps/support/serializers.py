"""Serializers for the contact-support inbox."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import ContactMessage


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ["id", "name", "email", "message", "status", "reply", "replied_at", "created_at"]
        read_only_fields = ["id", "status", "reply", "replied_at", "created_at"]


class AdminReplySerializer(serializers.Serializer):
    message_id = serializers.IntegerField(min_value=1)
    reply = serializers.CharField()

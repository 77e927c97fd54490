"""API views for the contact-support inbox."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.notifications.services import support_admin_alert_email, support_reply_email
from apps.notifications.tasks import queue_email
from apps.users.api.permissions import IsPlatformAdmin

from .models import ContactMessage
from .serializers import AdminReplySerializer, ContactMessageSerializer

logger = logging.getLogger(__name__)


class ContactSupportView(APIView):
    """Anyone can write to support; only admins read the inbox."""

    def get_permissions(self):  # type: ignore
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated(), IsPlatformAdmin()]

    def get(self, request):  # type: ignore
        messages = ContactMessage.objects.all()
        return Response(ContactMessageSerializer(messages, many=True).data)

    def post(self, request):  # type: ignore
        serializer = ContactMessageSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"message": "All fields are required!", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        contact_message = serializer.save()
        logger.info(f"Support message {contact_message.pk} received from {contact_message.email}")

        content = support_admin_alert_email(contact_message.name)
        queue_email(
            settings.SUPPORT_ADMIN_EMAIL,
            content["subject"],
            content["message"],
            from_email=settings.SUPPORT_FROM_EMAIL,
        )
        return Response({"message": "Message sent successfully!"}, status=status.HTTP_201_CREATED)


class ContactReplyView(APIView):
    """Admin reply: emails the author and resolves the message."""

    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]

    def patch(self, request):  # type: ignore
        serializer = AdminReplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        contact_message = ContactMessage.objects.filter(pk=serializer.validated_data["message_id"]).first()
        if contact_message is None:
            return Response({"message": "Message not found."}, status=status.HTTP_404_NOT_FOUND)

        contact_message.reply = serializer.validated_data["reply"]
        contact_message.status = ContactMessage.Status.RESOLVED
        contact_message.replied_at = timezone.now()
        contact_message.save(update_fields=["reply", "status", "replied_at", "updated_at"])

        content = support_reply_email(contact_message.reply)
        queue_email(
            contact_message.email,
            content["subject"],
            content["message"],
            from_email=settings.SUPPORT_FROM_EMAIL,
        )
        return Response({"message": "Reply sent and message status updated."}, status=status.HTTP_200_OK)

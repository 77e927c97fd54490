"""Celery tasks for outgoing email."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from kombu.exceptions import OperationalError  # type: ignore

from .services import send_email_notification

logger = logging.getLogger(__name__)


@shared_task(name="notifications.send_email")
def send_email_task(
    recipient_email: str,
    subject: str,
    message: str,
    from_email: str | None = None,
) -> bool:
    """Sends one email from a worker."""
    return send_email_notification(
        recipient_email=recipient_email,
        subject=subject,
        message=message,
        from_email=from_email,
    )


def queue_email(
    recipient_email: str,
    subject: str,
    message: str,
    from_email: str | None = None,
) -> None:
    """
    Queues an email for delivery.

    When the broker is unreachable the email is sent inline so the
    message is not lost.
    """
    try:
        send_email_task.delay(recipient_email, subject, message, from_email)
    except OperationalError:
        logger.warning(f"Broker unavailable, sending email to {recipient_email} inline")
        send_email_notification(
            recipient_email=recipient_email,
            subject=subject,
            message=message,
            from_email=from_email,
        )

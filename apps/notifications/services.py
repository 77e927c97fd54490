"""Email notification services."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.utils.html import strip_tags  # type: ignore

logger = logging.getLogger(__name__)


# ============================================================================
# EMAIL NOTIFICATIONS
# ============================================================================

def send_email_notification(
    recipient_email: str,
    subject: str,
    message: str,
    *,
    html_message: str | None = None,
    from_email: str | None = None,
) -> bool:
    """
    Sends a single email through Django's mail framework.

    Args:
        recipient_email: Recipient address
        subject: Subject line
        message: Plain text body; derived from ``html_message`` when empty
        html_message: Optional HTML body
        from_email: Sender; defaults to ``DEFAULT_FROM_EMAIL``

    Returns:
        bool: True when the message was handed to the mail backend
    """
    if html_message and not message:
        message = strip_tags(html_message)

    try:
        send_mail(
            subject=subject,
            message=message,
            from_email=from_email or settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient_email],
            html_message=html_message,
            fail_silently=False,
        )
    except Exception as e:
        logger.error(f"Failed to send email to {recipient_email}: {e}", exc_info=True)
        return False

    logger.info(f"Email sent successfully to {recipient_email}: {subject}")
    return True


def password_reset_email(reset_link: str) -> dict[str, str]:
    """Subject and body of the password reset message."""
    return {
        "subject": "Password Reset Request",
        "message": f"Click this link to reset your password: {reset_link}",
    }


def support_reply_email(reply: str) -> dict[str, str]:
    """Subject and body of an admin reply to a support message."""
    return {
        "subject": "Response to Your Support Message",
        "message": (
            "Dear User,\n\n"
            "We have replied to your support message:\n\n"
            f"{reply}\n\n"
            "Best regards,\nSupport Team"
        ),
    }


def support_admin_alert_email(sender_name: str) -> dict[str, str]:
    """Subject and body of the alert sent to the support mailbox."""
    return {
        "subject": "New Customer Support Message",
        "message": (
            f"You have received a new customer support message from {sender_name}. "
            "Please check the admin dashboard for more details."
        ),
    }

"""URL routing for the contact-support inbox."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ContactReplyView, ContactSupportView

app_name = "support"

urlpatterns = [
    path("contact-support/", ContactSupportView.as_view(), name="contact-support"),
    path("contact-support/reply/", ContactReplyView.as_view(), name="contact-reply"),
]

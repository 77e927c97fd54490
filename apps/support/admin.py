"""Admin registration for the support inbox."""

from __future__ import annotations

from django.contrib import admin

from .models import ContactMessage


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "status", "created_at", "replied_at")
    list_filter = ("status",)
    search_fields = ("name", "email", "message")
    readonly_fields = ("created_at", "updated_at", "replied_at")

"""Admin registration for payments."""

from __future__ import annotations

from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("id", "booking", "user", "listing", "price_paid", "status", "payment_date")
    list_filter = ("status", "payment_date")
    search_fields = ("checkout_session_id", "user__email", "listing__title")
    readonly_fields = ("checkout_session_id", "created_at", "updated_at")

"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "listing",
        "customer",
        "host",
        "payment_status",
        "start_date",
        "end_date",
        "total_price",
        "created_at",
    )
    list_filter = ("payment_status", "deletion_requested", "start_date")
    search_fields = ("listing__title", "customer__email", "host__email")
    readonly_fields = ("created_at", "updated_at")

"""Admin registrations for the listings domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Listing, ListingPhoto


class ListingPhotoInline(admin.TabularInline):
    model = ListingPhoto
    extra = 0
    fields = ("image", "order")


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "category",
        "type",
        "city",
        "country",
        "price",
        "creator",
        "is_approved",
    )
    list_filter = ("is_approved", "category", "type", "country")
    search_fields = ("title", "city", "province", "country", "creator__email")
    inlines = (ListingPhotoInline,)
    readonly_fields = ("created_at", "updated_at")
    actions = ("approve_listings",)

    @admin.action(description="Approve selected listings")
    def approve_listings(self, request, queryset):  # type: ignore
        queryset.update(is_approved=True)


@admin.register(ListingPhoto)
class ListingPhotoAdmin(admin.ModelAdmin):
    list_display = ("listing", "order", "uploaded_at")
    search_fields = ("listing__title",)

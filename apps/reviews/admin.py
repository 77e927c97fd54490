"""Admin registration for reviews."""

from __future__ import annotations

from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('listing', 'user', 'stars', 'created_at')
    list_filter = ('stars',)
    search_fields = ('listing__title', 'user__email', 'comment')
    readonly_fields = ('created_at', 'updated_at')

"""FilterSet definitions for the listing catalogue."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Listing


class ListingFilterSet(django_filters.FilterSet):
    """Catalogue filters; ``category`` matches exactly like the frontend tabs."""

    category = django_filters.CharFilter(field_name="category", lookup_expr="exact")
    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    price_min = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    guests = django_filters.NumberFilter(field_name="guest_count", lookup_expr="gte")

    class Meta:
        model = Listing
        fields = ["category", "city"]

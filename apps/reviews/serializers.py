"""Serializers for reviews.

Provide both read and write serializers for the ``Review`` model.
The creating user is inferred from the request in the view.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.listings.models import Listing

from .models import Review


class ReviewCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating a new review."""

    listing = serializers.PrimaryKeyRelatedField(queryset=Listing.objects.all())
    stars = serializers.IntegerField()

    class Meta:
        model = Review
        fields = ['listing', 'comment', 'stars']

    def validate_stars(self, value: int) -> int:  # type: ignore
        if value < 1 or value > 5:
            raise serializers.ValidationError('Stars must be between 1 and 5.')
        return value


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer for reviews including author name and listing title."""

    user_id = serializers.ReadOnlyField(source='user.id')
    first_name = serializers.ReadOnlyField(source='user.first_name')
    last_name = serializers.ReadOnlyField(source='user.last_name')
    listing_id = serializers.ReadOnlyField(source='listing.id')
    listing_title = serializers.ReadOnlyField(source='listing.title')

    class Meta:
        model = Review
        fields = [
            'id',
            'user_id',
            'first_name',
            'last_name',
            'listing_id',
            'listing_title',
            'stars',
            'comment',
            'created_at',
            'updated_at',
        ]


class ListingRatingSerializer(serializers.Serializer):
    listing_id = serializers.IntegerField()
    title = serializers.CharField()
    average_rating = serializers.FloatField()
    review_count = serializers.IntegerField()

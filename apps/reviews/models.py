"""Models for the review domain.

Defines the ``Review`` entity representing feedback and ratings
submitted by users for listings. Each review includes a star rating
and a comment. One user can leave at most one review per listing.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Review(models.Model):
    """Represents a review left by a user for a listing."""

    user = models.ForeignKey(
        'users.CustomUser', on_delete=models.CASCADE, related_name='reviews'
    )
    listing = models.ForeignKey(
        'listings.Listing', on_delete=models.CASCADE, related_name='reviews'
    )
    comment = models.TextField()
    stars = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text=_('Rating from 1 to 5')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'listing'], name='review_unique_user_listing'),
        ]
        indexes = [
            models.Index(fields=['listing', '-created_at']),
        ]

    def __str__(self) -> str:
        return f"Review by {self.user_id} for listing {self.listing_id} (Stars: {self.stars})"

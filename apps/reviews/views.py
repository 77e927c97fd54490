"""API views for managing reviews."""

from __future__ import annotations

from django.db import models  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.api.permissions import IsOwnerOrPlatformAdmin

from .models import Review
from .serializers import ListingRatingSerializer, ReviewCreateSerializer, ReviewSerializer


class ReviewViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Viewset for creating, listing and deleting reviews."""

    queryset = Review.objects.select_related('listing', 'user').all()
    lookup_value_regex = r'\d+'

    def get_permissions(self):  # type: ignore
        if self.action in {'list', 'average_per_property', 'for_listing'}:
            return [permissions.AllowAny()]
        if self.action == 'destroy':
            return [IsOwnerOrPlatformAdmin()]
        return [permissions.IsAuthenticated()]

    def get_serializer_class(self) -> type[ReviewSerializer]:  # type: ignore
        if self.action == 'create':
            return ReviewCreateSerializer  # type: ignore
        return ReviewSerializer  # type: ignore

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = serializer.validated_data['listing']
        if Review.objects.filter(user=request.user, listing=listing).exists():
            return Response(
                {'message': 'You have already reviewed this property'},
                status=status.HTTP_400_BAD_REQUEST,
            )
        review = serializer.save(user=request.user)
        return Response(
            {'message': 'Review submitted successfully', 'review': ReviewSerializer(review).data},
            status=status.HTTP_201_CREATED,
        )

    def destroy(self, request, *args, **kwargs):  # type: ignore
        review = self.get_object()
        review.delete()
        return Response({'message': 'Review deleted successfully'}, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], url_path='average-per-property')
    def average_per_property(self, request):
        """Average stars (one decimal) and review count per listing."""
        rows = (
            Review.objects.values('listing_id', title=models.F('listing__title'))
            .annotate(average_rating=models.Avg('stars'), review_count=models.Count('id'))
            .order_by('listing_id')
        )
        result = [dict(row, average_rating=round(row['average_rating'], 1)) for row in rows]
        return Response(ListingRatingSerializer(result, many=True).data)

    @action(detail=False, methods=['get'], url_path=r'listing/(?P<listing_id>\d+)')
    def for_listing(self, request, listing_id: str | None = None):
        """Reviews of one listing, newest first."""
        reviews = self.get_queryset().filter(listing_id=listing_id)
        if not reviews.exists():
            return Response(
                {'message': 'No reviews found for this listing.'},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(ReviewSerializer(reviews, many=True).data)

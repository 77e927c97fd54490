"""Listing API views."""

from __future__ import annotations

import logging

from django.db.models import Q  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.api.permissions import IsOwnerOrPlatformAdmin, IsPlatformAdmin

from .filters import ListingFilterSet
from .models import Listing
from .serializers import ListingSerializer, ListingWriteSerializer

logger = logging.getLogger(__name__)

SEARCH_FIELDS = (
    "city",
    "province",
    "country",
    "category",
    "type",
    "street_address",
    "title",
    "description",
    "creator__first_name",
    "creator__last_name",
)


class ListingViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Публичный каталог, публикация объявлений и модерация.

    - список показывает только одобренные объявления (фильтр ``category``)
    - создавать может любой авторизованный пользователь, объявление ждёт модерации
    - удалять может автор или администратор
    """

    queryset = Listing.objects.select_related("creator").prefetch_related("photos")
    filter_backends = [DjangoFilterBackend]
    filterset_class = ListingFilterSet
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    owner_field = "creator"
    lookup_value_regex = r"\d+"

    def get_permissions(self):  # type: ignore
        if self.action in {"list", "retrieve", "search"}:
            return [permissions.AllowAny()]
        if self.action in {"unapproved", "approve"}:
            return [permissions.IsAuthenticated(), IsPlatformAdmin()]
        if self.action == "destroy":
            return [IsOwnerOrPlatformAdmin()]
        return [permissions.IsAuthenticated()]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if self.action == "list":
            return qs.approved()
        return qs

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return ListingWriteSerializer
        return ListingSerializer

    def perform_create(self, serializer):  # type: ignore
        listing = serializer.save(creator=self.request.user)
        logger.info(f"Listing {listing.pk} created by user {self.request.user.pk}")

    def destroy(self, request, *args, **kwargs):  # type: ignore
        listing = self.get_object()
        listing.delete()
        return Response({"message": "Listing deleted successfully"}, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"])
    def unapproved(self, request):
        """Объявления, ожидающие модерации."""
        listings = self.get_queryset().pending_approval()
        return Response(ListingSerializer(listings, many=True, context={"request": request}).data)

    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        """Одобряет объявление и публикует его в каталоге."""
        listing = self.get_object()
        listing.approve()
        logger.info(f"Listing {listing.pk} approved by user {request.user.pk}")
        return Response(ListingSerializer(listing, context={"request": request}).data)

    @action(detail=False, methods=["get"], url_path=r"search/(?P<term>[^/]+)")
    def search(self, request, term: str | None = None):
        """Поиск по адресу, категории, тексту и имени хозяина; ``all`` возвращает всё."""
        qs = self.get_queryset()
        if term != "all":
            condition = Q()
            for field in SEARCH_FIELDS:
                condition |= Q(**{f"{field}__icontains": term})
            qs = qs.filter(condition)
            if not qs.exists():
                return Response(
                    {"message": "No listings found for this search."},
                    status=status.HTTP_404_NOT_FOUND,
                )
        return Response(ListingSerializer(qs, many=True, context={"request": request}).data)

"""Models describing rental listings."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ListingQuerySet(models.QuerySet):
    def approved(self) -> "ListingQuerySet":
        return self.filter(is_approved=True)

    def pending_approval(self) -> "ListingQuerySet":
        return self.filter(is_approved=False)


class Listing(models.Model):
    """A place offered for rent by its creator (the host)."""

    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="listings",
    )
    category = models.CharField(_("Category"), max_length=100, db_index=True)
    type = models.CharField(_("Place type"), max_length=100)

    street_address = models.CharField(_("Street address"), max_length=255)
    apt_suite = models.CharField(_("Apartment, suite"), max_length=100, blank=True)
    city = models.CharField(_("City"), max_length=120)
    province = models.CharField(_("Province"), max_length=120)
    country = models.CharField(_("Country"), max_length=120)

    guest_count = models.PositiveSmallIntegerField(_("Guests"), default=1)
    bedroom_count = models.PositiveSmallIntegerField(_("Bedrooms"), default=1)
    bed_count = models.PositiveSmallIntegerField(_("Beds"), default=1)
    bathroom_count = models.PositiveSmallIntegerField(_("Bathrooms"), default=1)
    amenities = models.JSONField(_("Amenities"), default=list, blank=True)

    title = models.CharField(_("Title"), max_length=255)
    description = models.TextField(_("Description"))
    highlight = models.CharField(_("Highlight"), max_length=255, blank=True)
    highlight_desc = models.TextField(_("Highlight details"), blank=True)
    price = models.DecimalField(_("Price per night"), max_digits=10, decimal_places=2)

    property_proof = models.FileField(
        _("Proof of ownership"),
        upload_to="proofs/",
        blank=True,
        null=True,
    )
    is_approved = models.BooleanField(_("Approved"), default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ListingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Listing")
        verbose_name_plural = _("Listings")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title

    def approve(self) -> None:
        self.is_approved = True
        self.save(update_fields=["is_approved", "updated_at"])


class ListingPhoto(models.Model):
    """Photos attached to a listing."""

    listing = models.ForeignKey(Listing, on_delete=models.CASCADE, related_name="photos")
    image = models.ImageField(upload_to="listings/photos/")
    order = models.PositiveIntegerField(default=0)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Listing photo")
        verbose_name_plural = _("Listing photos")
        ordering = ["order", "id"]

    def __str__(self) -> str:
        return f"{self.listing.title} [{self.order}]"

"""User domain models for MauriRent.

The platform differentiates two roles (user, admin). Any user can book
listings as a customer and publish listings as a host; admins moderate
listings, bookings, reviews and the support inbox. Users keep a wish list
of listings and may ask for their account to be deleted.
"""

from __future__ import annotations

import secrets
from typing import Any

from django.conf import settings  # type: ignore
from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """User manager that uses email as the login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.USER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Platform user with profile image, role and wish list."""

    class RoleChoices(models.TextChoices):
        USER = "user", _("User")
        ADMIN = "admin", _("Admin")

    username = models.CharField(
        _("Display name"),
        max_length=150,
        blank=True,
        help_text=_("Optional, shown in the interface and in emails."),
    )
    email = models.EmailField(_("Email"), unique=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.USER,
    )
    profile_image = models.ImageField(_("Profile image"), upload_to="profiles/", blank=True, null=True)
    is_online = models.BooleanField(
        _("Online"),
        default=False,
        help_text=_("Set on login and cleared on logout."),
    )
    deletion_requested = models.BooleanField(_("Deletion requested"), default=False)
    wish_list = models.ManyToManyField(
        "listings.Listing",
        blank=True,
        related_name="wished_by",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    # --- Domain helpers -----------------------------------------------------
    def is_admin(self) -> bool:
        return self.role == self.RoleChoices.ADMIN or self.is_superuser or self.is_staff

    def mark_online(self) -> None:
        self.is_online = True
        self.save(update_fields=["is_online"])

    def mark_offline(self) -> None:
        self.is_online = False
        self.save(update_fields=["is_online"])

    def request_deletion(self) -> None:
        self.deletion_requested = True
        self.save(update_fields=["deletion_requested"])

    def toggle_wish_list(self, listing) -> bool:
        """Adds or removes a listing; returns True when it was added."""
        if self.wish_list.filter(pk=listing.pk).exists():
            self.wish_list.remove(listing)
            return False
        self.wish_list.add(listing)
        return True


class PasswordResetToken(models.Model):
    """Single-use password reset token with an expiry time."""

    user = models.ForeignKey(
        CustomUser,
        on_delete=models.CASCADE,
        related_name="password_reset_tokens",
    )
    token = models.CharField(max_length=64, unique=True, editable=False)
    expires_at = models.DateTimeField()
    is_used = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Password reset token")
        verbose_name_plural = _("Password reset tokens")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["token", "expires_at"]),
        ]

    def __str__(self) -> str:
        return f"Reset token for {self.user_id}"

    @classmethod
    def issue_for(cls, user: CustomUser) -> "PasswordResetToken":
        cls.objects.filter(user=user, is_used=False).update(is_used=True)
        return cls.objects.create(
            user=user,
            token=secrets.token_urlsafe(32),
            expires_at=timezone.now() + timezone.timedelta(minutes=settings.PASSWORD_RESET_TOKEN_MINUTES),
        )

    @property
    def is_expired(self) -> bool:
        return timezone.now() >= self.expires_at

    @property
    def is_valid(self) -> bool:
        return not self.is_used and not self.is_expired

    def mark_used(self) -> None:
        self.is_used = True
        self.save(update_fields=["is_used"])


# Short alias used across apps and tests
User = CustomUser

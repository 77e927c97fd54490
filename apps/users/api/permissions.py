"""Permission classes shared by the MauriRent APIs."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def is_platform_admin(user) -> bool:  # type: ignore
    if not user or not user.is_authenticated:
        return False
    return hasattr(user, "is_admin") and user.is_admin()


class IsPlatformAdmin(permissions.BasePermission):
    """
    Permission class that only allows platform admins to access.

    An admin is a user with role='admin' or a Django staff/superuser.
    """

    def has_permission(self, request, view) -> bool:  # type: ignore
        return is_platform_admin(request.user)


class IsSelfOrPlatformAdmin(permissions.BasePermission):
    """
    Object-level permission: the object must be the requesting user,
    unless the user is a platform admin.
    """

    def has_permission(self, request, view) -> bool:  # type: ignore
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        if is_platform_admin(request.user):
            return True
        return obj.pk == request.user.pk


class IsOwnerOrPlatformAdmin(permissions.BasePermission):
    """
    Object-level permission for objects owned through a user foreign key.

    The owning attribute is read from ``view.owner_field`` (default ``user``).
    """

    def has_permission(self, request, view) -> bool:  # type: ignore
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        if is_platform_admin(request.user):
            return True
        owner_field = getattr(view, "owner_field", "user")
        return getattr(obj, f"{owner_field}_id", None) == request.user.pk

"""DRF permission classes."""

from __future__ import annotations

from rest_framework.permissions import BasePermission
from rest_framework.request import Request


class IsAdmin(BasePermission):
    """Allow only requests authenticated with a valid admin token."""

    def has_permission(self, request: Request, view) -> bool:
        return bool(getattr(request.user, "is_admin", False))

"""Domain error base class.

Services raise ``DomainError`` subclasses carrying a machine-readable
``code``, an HTTP ``status_code`` and the offending ``attr``;
``modules.core.handlers.api_exception_handler`` renders them.
"""

from __future__ import annotations

from typing import Optional

from django.core.exceptions import ImproperlyConfigured
from rest_framework import status


class DomainError(Exception):
    """Base class for business-rule violations surfaced to API callers."""

    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Die Anfrage ist ungültig."

    def __init__(self, detail: Optional[str] = None, attr: Optional[str] = None):
        self.detail = detail or self.default_detail
        self.attr = attr
        super().__init__(self.detail)


class AuthInvalid(DomainError):
    """Admin credentials or bearer token rejected (cause is never revealed)."""

    code = "auth_invalid"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Ungültige Anmeldedaten oder abgelaufenes Token."


class StoreUnavailable(ImproperlyConfigured):
    """The primary order store cannot be reached at startup."""

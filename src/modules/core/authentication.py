"""Admin session gate: credential check, token issuance and verification.

There is exactly one administrator, configured through the environment.
``AdminSessionGate.login`` exchanges the configured username/password for a
signed HS256 JWT (PyJWT) carrying an ``admin`` claim; ``authorize``
verifies signature, expiry and claim on every admin request.

Security decisions
------------------
* **Fail Closed**: any decode / validation error is ``AuthInvalid``.
* ``algorithms`` is hard-coded to HS256, never derived from the token.
* Invalid, expired and non-admin tokens are rejected with the same message.
* Credentials are compared in constant time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple

import jwt as pyjwt
import structlog
from django.utils import timezone
from django.utils.crypto import constant_time_compare
from jwt.exceptions import PyJWTError
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from modules.core.conf import ShopSettings
from modules.core.exceptions import AuthInvalid

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"
ADMIN_CLAIM = "admin"


class AdminSessionGate:
    """Issues and verifies the administrator's bearer token."""

    def __init__(
        self,
        shop: ShopSettings,
        now: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._shop = shop
        self._now = now

    def login(self, username: str, password: str) -> str:
        """Return a signed admin token or raise ``AuthInvalid``."""
        username_ok = constant_time_compare(username or "", self._shop.admin_username)
        password_ok = constant_time_compare(password or "", self._shop.admin_password)
        if not (username_ok and password_ok):
            logger.warning("admin.login_failed")
            raise AuthInvalid()

        issued_at = self._now()
        token = pyjwt.encode(
            {
                "sub": self._shop.admin_username,
                ADMIN_CLAIM: True,
                "iat": issued_at,
                "exp": issued_at + self._shop.admin_token_lifetime,
            },
            self._shop.admin_token_secret,
            algorithm=ALGORITHM,
        )
        logger.info("admin.login_succeeded")
        return token

    def authorize(self, token: str) -> Dict[str, Any]:
        """Return the token claims or raise ``AuthInvalid``."""
        try:
            claims = pyjwt.decode(
                token,
                self._shop.admin_token_secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat", "sub"]},
            )
        except PyJWTError as exc:
            logger.warning("admin.token_rejected", reason=exc.__class__.__name__)
            raise AuthInvalid() from exc

        if claims.get(ADMIN_CLAIM) is not True:
            logger.warning("admin.token_rejected", reason="missing_admin_claim")
            raise AuthInvalid()
        return claims


class AdminUser:
    """Request principal for a verified admin token.

    No Django ``User`` row backs it; DRF only needs the flags below.
    """

    is_authenticated = True
    is_active = True
    is_admin = True

    def __init__(self, claims: Dict[str, Any]) -> None:
        self.claims = claims
        self.pk = claims.get("sub", "")

    def __str__(self) -> str:  # pragma: no cover
        return str(self.pk)


class AdminTokenAuthentication(BaseAuthentication):
    """DRF authentication class validating ``Authorization: Bearer <jwt>``."""

    keyword = "Bearer"

    def authenticate(self, request: Request) -> Optional[Tuple[AdminUser, str]]:
        """Return ``(AdminUser, token)`` or ``None`` (no credentials)."""
        header = request.META.get("HTTP_AUTHORIZATION", "")
        if not header:
            return None

        token = self._extract_token(header)
        gate = AdminSessionGate(ShopSettings.from_django())
        try:
            claims = gate.authorize(token)
        except AuthInvalid as exc:
            raise AuthenticationFailed(exc.detail, code=exc.code) from exc
        return AdminUser(claims), token

    def authenticate_header(self, request: Request) -> str:
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'{self.keyword} realm="admin"'

    @staticmethod
    def _extract_token(header: str) -> str:
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthenticationFailed(
                AuthInvalid.default_detail, code=AuthInvalid.code
            )
        return parts[1]

"""HTTP mail-provider client.

Posts ``{from, to, subject, text, html}`` as JSON to the configured
provider endpoint with a bearer API key.  Every call is bounded by
``mail_timeout_seconds``; transport errors and non-2xx answers raise
``MailDeliveryFailed``.
"""

from __future__ import annotations

from typing import Optional

import requests
import structlog

from modules.core.conf import ShopSettings
from modules.notifications.exceptions import MailDeliveryFailed

logger = structlog.get_logger(__name__)


class MailClient:
    """Thin wrapper around the provider's send endpoint."""

    def __init__(
        self, shop: ShopSettings, session: Optional[requests.Session] = None
    ) -> None:
        self._url = shop.mail_api_url
        self._api_key = shop.mail_api_key
        self._sender = shop.mail_from
        self._timeout = shop.mail_timeout_seconds
        self._http = session or requests

    def send(
        self,
        to: str,
        subject: str,
        text: str,
        html: str,
        sender: Optional[str] = None,
    ) -> None:
        payload = {
            "from": sender or self._sender,
            "to": to,
            "subject": subject,
            "text": text,
            "html": html,
        }
        try:
            response = self._http.post(
                self._url,
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise MailDeliveryFailed(f"Mail transport error: {exc}") from exc

        if response.status_code >= 400:
            raise MailDeliveryFailed(
                f"Mail provider answered HTTP {response.status_code}."
            )
        logger.info("mail.sent", subject=subject)

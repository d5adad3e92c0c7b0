"""Notification service.

Composes the customer message for an order event and hands it to the mail
client: once to the customer and, when enabled, once to the administrator.
Mail problems never propagate; each failed send is logged and returned as
a warning string so the API can report it next to a successful response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from modules.core.conf import ShopSettings
from modules.notifications.composer import (
    ComposedMessage,
    DeliveryWindow,
    NotificationEvent,
    compose,
)
from modules.notifications.exceptions import MailDeliveryFailed
from modules.notifications.mail import MailClient
from modules.orders.dtos import OrderSnapshotDTO

logger = structlog.get_logger(__name__)

CUSTOMER_MAIL_WARNING = "Bestätigungs-E-Mail konnte nicht versendet werden."
ADMIN_MAIL_WARNING = "Kopie an den Administrator konnte nicht versendet werden."


class NotificationService:
    def __init__(self, mail_client: MailClient, shop: ShopSettings) -> None:
        self._mail = mail_client
        self._shop = shop

    def notify(
        self,
        event: NotificationEvent,
        order: OrderSnapshotDTO,
        *,
        delivery_window: Optional[DeliveryWindow] = None,
    ) -> List[str]:
        """Send the event mail; return warnings for failed sends."""
        message = compose(event, order, delivery_window=delivery_window)
        log = logger.bind(
            event=NotificationEvent(event).value, customer_id=order.customer_id
        )
        warnings: List[str] = []

        if not self._deliver(order.email, message, log, recipient="customer"):
            warnings.append(CUSTOMER_MAIL_WARNING)

        if self._shop.mail_admin_copy and self._shop.admin_email:
            admin_message = ComposedMessage(
                subject=f"[Admin] {message.subject}",
                plain_text=message.plain_text,
                html_body=message.html_body,
            )
            if not self._deliver(
                self._shop.admin_email, admin_message, log, recipient="admin"
            ):
                warnings.append(ADMIN_MAIL_WARNING)

        return warnings

    def _deliver(self, to: str, message: ComposedMessage, log, recipient: str) -> bool:
        try:
            self._mail.send(
                to=to,
                subject=message.subject,
                text=message.plain_text,
                html=message.html_body,
            )
        except MailDeliveryFailed as exc:
            log.warning("mail.send_failed", recipient=recipient, error=str(exc))
            return False
        return True


def build_notification_service() -> NotificationService:
    shop = ShopSettings.from_django()
    return NotificationService(MailClient(shop), shop)

"""Customer notification texts.

``compose`` turns an order snapshot and an event into a subject, a
plain-text body and an HTML body.  It performs no I/O; sending is the
job of ``services.NotificationService``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import List, Optional, Tuple

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

from modules.orders.constants import CANCELLATION_CUTOFF_HOURS, TreeSize
from modules.orders.date_policy import planned_delivery_day
from modules.orders.dtos import OrderSnapshotDTO

DATE_FORMAT = "%d.%m.%Y"
TIME_FORMAT = "%H:%M"
NO_DATE_PHRASE = "in 2 Tagen"

PAYMENT_REMINDER = "Die Bezahlung erfolgt bar bei Lieferung."
CANCELLATION_REMINDER = (
    f"Eine Stornierung ist bis {CANCELLATION_CUTOFF_HOURS} Stunden vor dem "
    "Liefertermin möglich. Bitte halten Sie dazu Ihre Kunden-ID bereit."
)
SIGNATURE = "Frohe Weihnachten!\nIhr Weihnachtsbaum-Lieferservice"


class NotificationEvent(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    CANCELLED = "cancelled"
    DELIVERY_SCHEDULED = "delivery_scheduled"


@dataclass(frozen=True)
class DeliveryWindow:
    start: time
    end: time


@dataclass(frozen=True)
class ComposedMessage:
    subject: str
    plain_text: str
    html_body: str


def format_delivery_date(order: OrderSnapshotDTO) -> str:
    """``DD.MM.YYYY`` for a chosen date, the relative phrase otherwise."""
    if order.date is None:
        return NO_DATE_PHRASE
    return order.date.strftime(DATE_FORMAT)


def _details(order: OrderSnapshotDTO) -> List[Tuple[str, str]]:
    rows = [
        ("Kunden-ID", order.customer_id),
        ("Name", order.name),
        ("Baumgröße", TreeSize(order.size).label),
        ("Lieferadresse", f"{order.street}, {order.zip} {order.city}"),
        ("Liefertermin", format_delivery_date(order)),
    ]
    if order.special_requests:
        rows.append(("Sonderwünsche", order.special_requests))
    return rows


def _headline(
    event: NotificationEvent,
    order: OrderSnapshotDTO,
    window: Optional[DeliveryWindow],
) -> Tuple[str, str]:
    if event is NotificationEvent.CREATED:
        return (
            f"Ihre Weihnachtsbaum-Bestellung {order.customer_id}",
            "vielen Dank für Ihre Bestellung! Hier sind Ihre Bestelldaten:",
        )
    if event is NotificationEvent.UPDATED:
        return (
            f"Ihre Bestellung {order.customer_id} wurde geändert",
            "Ihre Bestellung wurde erfolgreich geändert. Die aktuellen Daten:",
        )
    if event is NotificationEvent.CANCELLED:
        return (
            f"Ihre Bestellung {order.customer_id} wurde storniert",
            "Ihre Bestellung wurde storniert. Folgende Bestellung wurde entfernt:",
        )
    if window is None:
        raise ValueError("delivery_scheduled requires a delivery window")
    day = planned_delivery_day(order).strftime(DATE_FORMAT)
    return (
        f"Ihr Liefertermin für Bestellung {order.customer_id}",
        f"Ihr Weihnachtsbaum wird am {day} zwischen "
        f"{window.start.strftime(TIME_FORMAT)} und "
        f"{window.end.strftime(TIME_FORMAT)} Uhr geliefert.",
    )


def _reminders(event: NotificationEvent) -> List[str]:
    if event is NotificationEvent.CANCELLED:
        return []
    if event is NotificationEvent.DELIVERY_SCHEDULED:
        return [PAYMENT_REMINDER]
    return [PAYMENT_REMINDER, CANCELLATION_REMINDER]


def compose(
    event: NotificationEvent,
    order: OrderSnapshotDTO,
    *,
    delivery_window: Optional[DeliveryWindow] = None,
) -> ComposedMessage:
    """Render the customer message for *event* on *order*.

    Raises:
        ValueError: ``DELIVERY_SCHEDULED`` without a *delivery_window*.
    """
    event = NotificationEvent(event)
    subject, intro = _headline(event, order, delivery_window)
    details = _details(order)
    reminders = _reminders(event)

    text_lines = [f"Hallo {order.name},", "", intro, ""]
    text_lines += [f"{label}: {value}" for label, value in details]
    if reminders:
        text_lines.append("")
        text_lines += reminders
    text_lines += ["", SIGNATURE]

    html_parts: List[SafeString] = [
        format_html("<p>Hallo {},</p>", order.name),
        format_html("<p>{}</p>", intro),
        format_html(
            "<table>{}</table>",
            format_html_join(
                "", "<tr><th align=\"left\">{}</th><td>{}</td></tr>", details
            ),
        ),
    ]
    html_parts += [format_html("<p><strong>{}</strong></p>", r) for r in reminders]
    html_parts.append(
        format_html("<p>{}<br>{}</p>", *SIGNATURE.split("\n", 1))
    )

    return ComposedMessage(
        subject=subject,
        plain_text="\n".join(text_lines),
        html_body=mark_safe("\n".join(html_parts)),
    )

"""Order domain exceptions.

Raised by the validator and the Service Layer when business rules are
violated.  Each carries the machine-readable ``code`` and HTTP status the
API boundary uses; ``detail`` is the customer-facing (German) message.
"""

from __future__ import annotations

from typing import Sequence

from rest_framework import status

from modules.core.exceptions import DomainError


class OrderValidationError(DomainError):
    """Base for input rejected by the order validator."""


class MissingField(OrderValidationError):
    code = "missing_field"
    default_detail = "Pflichtfeld fehlt."

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = list(fields)
        super().__init__(
            f"Pflichtfelder fehlen: {', '.join(self.fields)}.",
            attr=self.fields[0] if self.fields else None,
        )


class InvalidPayload(OrderValidationError):
    """Request body is not a JSON object (or form) of fields."""

    code = "invalid_payload"
    default_detail = "Die Anfrage muss ein Objekt mit Bestellfeldern sein."


class FieldTooLong(OrderValidationError):
    code = "field_too_long"
    default_detail = "Eingabe ist zu lang."

    def __init__(self, field: str, max_length: int) -> None:
        super().__init__(
            f"Feld {field} darf höchstens {max_length} Zeichen lang sein.",
            attr=field,
        )


class InvalidEmailFormat(OrderValidationError):
    code = "invalid_email_format"
    default_detail = "Ungültige E-Mail."


class InvalidSize(OrderValidationError):
    code = "invalid_size"
    default_detail = "Unbekannte Baumgröße."


class ZipNotServiceable(OrderValidationError):
    code = "zip_not_serviceable"
    default_detail = "PLZ außerhalb des Liefergebiets."


class CityZipMismatch(OrderValidationError):
    code = "city_zip_mismatch"
    default_detail = "Ort passt nicht zur PLZ."


class InvalidDateFormat(OrderValidationError):
    code = "invalid_date_format"
    default_detail = "Ungültiges Lieferdatum (erwartet JJJJ-MM-TT)."


class DateTooEarly(OrderValidationError):
    code = "date_too_early"
    default_detail = "Lieferung frühestens ab morgen möglich."


class DateTooLate(OrderValidationError):
    code = "date_too_late"
    default_detail = "Lieferdatum liegt nach dem letzten Liefertag."


class DuplicateEmail(DomainError):
    """An order with this email already exists (one order per email)."""

    code = "duplicate_email"
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Für diese E-Mail existiert bereits eine Bestellung."


class OrderNotFound(DomainError):
    """No order matches the given email/customer-id pair."""

    code = "order_not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Keine Bestellung gefunden."


class CancellationWindowClosed(DomainError):
    """Planned delivery is less than 24 hours away."""

    code = "cancellation_window_closed"
    status_code = status.HTTP_409_CONFLICT
    default_detail = (
        "Stornierung nur bis 24 Stunden vor dem Liefertermin möglich."
    )


class InvalidOrderStatus(DomainError):
    """Admin attempted to set a status outside the known set."""

    code = "invalid_order_status"
    default_detail = "Unbekannter Bestellstatus."

"""Order admission checks.

Pure functions (no I/O): given the raw submitted fields they either return
an ``OrderInputDTO`` or raise the first failing ``OrderValidationError``.
Checks run in this order:

1. body is a mapping of fields
2. required fields present (all missing ones reported together)
3. field lengths fit the order columns
4. email shape
5. tree size
6. zip inside the delivery area
7. city matches the zip
8. delivery date window, only if a date was supplied
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping, Optional, Tuple

from modules.orders import directory
from modules.orders.constants import (
    CITY_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    STREET_MAX_LENGTH,
    TreeSize,
)
from modules.orders.date_policy import check_window
from modules.orders.dtos import OrderInputDTO
from modules.orders.exceptions import (
    CityZipMismatch,
    FieldTooLong,
    InvalidEmailFormat,
    InvalidPayload,
    InvalidSize,
    MissingField,
    ZipNotServiceable,
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

CREATE_REQUIRED_FIELDS = ("name", "size", "street", "zip", "city", "email")
UPDATE_REQUIRED_FIELDS = ("customerId", "size", "street", "zip", "city", "email")
IDENTITY_FIELDS = ("email", "customerId")
MAX_LENGTHS = {
    "name": NAME_MAX_LENGTH,
    "street": STREET_MAX_LENGTH,
    "email": EMAIL_MAX_LENGTH,
    "city": CITY_MAX_LENGTH,
}


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_customer_id(customer_id: str) -> str:
    return customer_id.strip().upper()


def _require(data: Any, fields: Tuple[str, ...]) -> None:
    if not isinstance(data, Mapping):
        raise InvalidPayload()
    missing = [field for field in fields if not _text(data, field)]
    if missing:
        raise MissingField(missing)


def validate_identity(data: Any) -> Tuple[str, str]:
    """Return normalized ``(email, customer_id)`` for lookup/cancel requests.

    Raises:
        InvalidPayload: body is not a mapping.
        MissingField: email or customerId absent.
    """
    _require(data, IDENTITY_FIELDS)
    return (
        normalize_email(_text(data, "email")),
        normalize_customer_id(_text(data, "customerId")),
    )


def validate_order_input(
    data: Any,
    *,
    today: date,
    max_date: Optional[date] = None,
    for_update: bool = False,
) -> OrderInputDTO:
    """Admit or reject a create/update submission.

    ``data`` uses the wire names (``customerId``, ``specialRequests``).
    On the update path ``customerId`` is required and ``name`` is optional.

    Raises:
        InvalidPayload, MissingField, FieldTooLong, InvalidEmailFormat,
        InvalidSize, ZipNotServiceable, CityZipMismatch, InvalidDateFormat,
        DateTooEarly, DateTooLate
    """
    _require(data, UPDATE_REQUIRED_FIELDS if for_update else CREATE_REQUIRED_FIELDS)
    for field, max_length in MAX_LENGTHS.items():
        if len(_text(data, field)) > max_length:
            raise FieldTooLong(field, max_length)

    email = _text(data, "email")
    if not EMAIL_PATTERN.match(email):
        raise InvalidEmailFormat(attr="email")

    size = _text(data, "size").lower()
    if size not in TreeSize.values:
        raise InvalidSize(attr="size")

    zip_code = _text(data, "zip")
    if not directory.is_serviceable(zip_code):
        raise ZipNotServiceable(attr="zip")

    city = _text(data, "city")
    if not directory.city_matches(zip_code, city):
        raise CityZipMismatch(attr="city")

    delivery_date = check_window(data.get("date"), today, max_date)

    customer_id = _text(data, "customerId")
    return OrderInputDTO(
        name=_text(data, "name"),
        size=TreeSize(size),
        street=_text(data, "street"),
        zip=zip_code,
        city=directory.canonical_city(zip_code),
        email=normalize_email(email),
        date=delivery_date,
        special_requests=_text(data, "specialRequests"),
        customer_id=normalize_customer_id(customer_id) if customer_id else None,
    )

"""Unit tests for the order admission checks."""

from __future__ import annotations

from datetime import date

import pytest

from modules.orders.constants import TreeSize
from modules.orders.exceptions import (
    CityZipMismatch,
    DateTooEarly,
    DateTooLate,
    FieldTooLong,
    InvalidEmailFormat,
    InvalidPayload,
    InvalidSize,
    MissingField,
    ZipNotServiceable,
)
from modules.orders.validators import validate_identity, validate_order_input

pytestmark = pytest.mark.unit

TODAY = date(2025, 12, 1)


def submit(data, **kwargs):
    return validate_order_input(data, today=TODAY, **kwargs)


class TestCreateInput:
    def test_valid_submission(self, order_payload):
        dto = submit(order_payload)
        assert dto.name == "Anna Schmidt"
        assert dto.size is TreeSize.MEDIUM
        assert dto.zip == "57072"
        assert dto.date is None
        assert dto.special_requests == "Bitte klingeln"
        assert dto.customer_id is None

    def test_city_is_stored_in_canonical_spelling(self, order_payload):
        dto = submit({**order_payload, "city": "  siegen "})
        assert dto.city == "Siegen"

    def test_email_is_normalized(self, order_payload):
        dto = submit({**order_payload, "email": " Anna@Example.COM "})
        assert dto.email == "anna@example.com"

    def test_size_is_case_insensitive(self, order_payload):
        assert submit({**order_payload, "size": "XL"}).size is TreeSize.XL

    def test_date_is_parsed(self, order_payload):
        dto = submit({**order_payload, "date": "2025-12-20"})
        assert dto.date == date(2025, 12, 20)

    def test_missing_fields_are_reported_together(self, order_payload):
        data = {**order_payload, "name": "  ", "street": ""}
        del data["email"]
        with pytest.raises(MissingField) as exc_info:
            submit(data)
        assert exc_info.value.fields == ["name", "street", "email"]
        assert exc_info.value.attr == "name"

    @pytest.mark.parametrize("email", ["anna", "anna@example", "an na@example.com", "@x.de"])
    def test_invalid_email(self, order_payload, email):
        with pytest.raises(InvalidEmailFormat):
            submit({**order_payload, "email": email})

    def test_unknown_size(self, order_payload):
        with pytest.raises(InvalidSize):
            submit({**order_payload, "size": "huge"})

    def test_zip_outside_area(self, order_payload):
        with pytest.raises(ZipNotServiceable):
            submit({**order_payload, "zip": "99999"})

    def test_city_not_matching_zip(self, order_payload):
        with pytest.raises(CityZipMismatch):
            submit({**order_payload, "city": "Kreuztal"})

    def test_today_rejected(self, order_payload):
        with pytest.raises(DateTooEarly):
            submit({**order_payload, "date": "2025-12-01"})

    def test_after_configured_cutoff_rejected(self, order_payload):
        with pytest.raises(DateTooLate):
            submit({**order_payload, "date": "2025-12-21"}, max_date=date(2025, 12, 20))

    def test_checks_run_in_order(self, order_payload):
        # Bad email and bad zip: the email check comes first.
        data = {**order_payload, "email": "kaputt", "zip": "99999"}
        with pytest.raises(InvalidEmailFormat):
            submit(data)

    def test_zip_checked_before_city(self, order_payload):
        with pytest.raises(ZipNotServiceable):
            submit({**order_payload, "zip": "99999", "city": "Nirgendwo"})


class TestUpdateInput:
    def test_customer_id_required(self, order_payload):
        with pytest.raises(MissingField) as exc_info:
            submit(order_payload, for_update=True)
        assert exc_info.value.fields == ["customerId"]

    def test_name_optional_on_update(self, order_payload):
        data = {**order_payload, "name": "", "customerId": " ab12cd34 "}
        dto = submit(data, for_update=True)
        assert dto.name == ""
        assert dto.customer_id == "AB12CD34"


class TestIdentity:
    def test_normalizes_pair(self):
        email, customer_id = validate_identity(
            {"email": " Anna@Example.com", "customerId": "ab12cd34 "}
        )
        assert email == "anna@example.com"
        assert customer_id == "AB12CD34"

    def test_missing_customer_id(self):
        with pytest.raises(MissingField) as exc_info:
            validate_identity({"email": "anna@example.com"})
        assert exc_info.value.fields == ["customerId"]


class TestPayloadShape:
    @pytest.mark.parametrize("data", [[], ["x"], "anna", None, 42])
    def test_non_mapping_order_body(self, data):
        with pytest.raises(InvalidPayload):
            submit(data)

    @pytest.mark.parametrize("data", [[], ["x"], None])
    def test_non_mapping_identity_body(self, data):
        with pytest.raises(InvalidPayload):
            validate_identity(data)

    @pytest.mark.parametrize(
        "field, limit", [("name", 255), ("street", 255), ("city", 100)]
    )
    def test_field_longer_than_column(self, order_payload, field, limit):
        with pytest.raises(FieldTooLong) as exc_info:
            submit({**order_payload, field: "x" * (limit + 1)})
        assert exc_info.value.attr == field

    def test_email_longer_than_column(self, order_payload):
        with pytest.raises(FieldTooLong):
            submit({**order_payload, "email": "a" * 250 + "@example.com"})

    def test_field_at_column_width_is_accepted(self, order_payload):
        dto = submit({**order_payload, "name": "N" * 255, "street": "S" * 255})
        assert len(dto.name) == 255

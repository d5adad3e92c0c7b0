"""Unit tests for AdminSessionGate (login, token verification)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone

import jwt as pyjwt
import pytest

from modules.core.authentication import AdminSessionGate
from modules.core.conf import ShopSettings
from modules.core.exceptions import AuthInvalid

pytestmark = pytest.mark.unit

SECRET = "unit-test-secret-0123456789abcdef"


@pytest.fixture()
def shop():
    return ShopSettings(
        admin_username="admin",
        admin_password="tannenbaum",
        admin_token_secret=SECRET,
        admin_token_lifetime=timedelta(hours=12),
        admin_email="admin@treedelivery.test",
        mail_from="bestellung@treedelivery.test",
        mail_api_key="key",
    )


@pytest.fixture()
def gate(shop):
    return AdminSessionGate(shop)


class TestLogin:
    def test_valid_credentials_issue_admin_token(self, gate):
        token = gate.login("admin", "tannenbaum")
        claims = pyjwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["admin"] is True
        assert claims["sub"] == "admin"
        assert claims["exp"] - claims["iat"] == 12 * 3600

    @pytest.mark.parametrize(
        "username, password",
        [("admin", "falsch"), ("root", "tannenbaum"), ("", ""), (None, None)],
    )
    def test_invalid_credentials_raise_auth_invalid(self, gate, username, password):
        with pytest.raises(AuthInvalid):
            gate.login(username, password)


class TestAuthorize:
    def test_round_trip(self, gate):
        claims = gate.authorize(gate.login("admin", "tannenbaum"))
        assert claims["admin"] is True

    def test_expired_token_rejected(self, shop):
        issued = datetime(2020, 12, 1, 8, 0, tzinfo=dt_timezone.utc)
        old_gate = AdminSessionGate(shop, now=lambda: issued)
        token = old_gate.login("admin", "tannenbaum")

        with pytest.raises(AuthInvalid):
            AdminSessionGate(shop).authorize(token)

    def test_wrong_secret_rejected(self, gate):
        now = datetime.now(dt_timezone.utc)
        token = pyjwt.encode(
            {"sub": "admin", "admin": True, "iat": now, "exp": now + timedelta(hours=1)},
            "some-other-secret-0123456789abcdef",
            algorithm="HS256",
        )
        with pytest.raises(AuthInvalid):
            gate.authorize(token)

    def test_missing_admin_claim_rejected(self, gate):
        now = datetime.now(dt_timezone.utc)
        token = pyjwt.encode(
            {"sub": "admin", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(AuthInvalid):
            gate.authorize(token)

    def test_missing_exp_rejected(self, gate):
        token = pyjwt.encode(
            {"sub": "admin", "admin": True, "iat": datetime.now(dt_timezone.utc)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(AuthInvalid):
            gate.authorize(token)

    def test_garbage_rejected(self, gate):
        with pytest.raises(AuthInvalid):
            gate.authorize("not.a.token")

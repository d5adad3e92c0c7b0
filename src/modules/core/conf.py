"""Shop configuration object.

``settings.SHOP`` is read once at startup by Django; components never reach
into ``django.conf.settings`` themselves but receive a frozen
``ShopSettings`` through their constructor.  Tests build one directly.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class ShopSettings(BaseModel):
    """Immutable view of the shop-level configuration."""

    model_config = ConfigDict(frozen=True)

    admin_username: str
    admin_password: str
    admin_token_secret: str
    admin_token_lifetime: timedelta = timedelta(hours=12)
    admin_email: str
    mail_from: str
    mail_api_key: str
    mail_api_url: str = "https://api.resend.com/emails"
    mail_timeout_seconds: float = 10.0
    mail_admin_copy: bool = True
    max_delivery_date: Optional[date] = None
    default_prices: Dict[str, Decimal] = {}

    @classmethod
    def from_django(cls) -> ShopSettings:
        from django.conf import settings

        shop = settings.SHOP
        return cls(
            admin_username=shop["ADMIN_USERNAME"],
            admin_password=shop["ADMIN_PASSWORD"],
            admin_token_secret=shop["ADMIN_TOKEN_SECRET"],
            admin_token_lifetime=timedelta(hours=shop["ADMIN_TOKEN_LIFETIME_HOURS"]),
            admin_email=shop["ADMIN_EMAIL"],
            mail_from=shop["MAIL_FROM"],
            mail_api_key=shop["MAIL_API_KEY"],
            mail_api_url=shop["MAIL_API_URL"],
            mail_timeout_seconds=shop["MAIL_TIMEOUT_SECONDS"],
            mail_admin_copy=shop["MAIL_ADMIN_COPY"],
            max_delivery_date=shop["MAX_DELIVERY_DATE"],
            default_prices=dict(shop["DEFAULT_PRICES"]),
        )

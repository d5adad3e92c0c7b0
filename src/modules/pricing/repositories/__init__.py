"""Price repositories package."""

from modules.pricing.repositories.django_repository import PriceDjangoRepository
from modules.pricing.repositories.interfaces import IPriceRepository

__all__ = ["IPriceRepository", "PriceDjangoRepository"]

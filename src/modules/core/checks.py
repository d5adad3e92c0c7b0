"""Startup checks for mandatory collaborators."""

from __future__ import annotations

import structlog
from django.db import DatabaseError, connections

from modules.core.exceptions import StoreUnavailable

logger = structlog.get_logger(__name__)


def check_primary_store(alias: str = "default") -> None:
    """Open a connection to the order store or raise ``StoreUnavailable``.

    Called once from ``config.wsgi``; the application must not serve
    requests without its primary store.
    """
    try:
        connections[alias].ensure_connection()
    except DatabaseError as exc:
        logger.critical("store.unavailable", alias=alias, error=str(exc))
        raise StoreUnavailable(f"Order store '{alias}' is unreachable.") from exc
    logger.info("store.connected", alias=alias)

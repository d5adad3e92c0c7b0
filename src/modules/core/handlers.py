"""DRF exception handler producing the standard error body::

    {"type": "client_error",
     "errors": [{"code": "...", "detail": "...", "attr": "..."}],
     "error": "..."}

``error`` repeats the first detail for the admin/customer frontends.
Anything that is neither a ``DomainError`` nor a DRF ``APIException`` is
logged with its full traceback and rendered as a generic 500.

Kept apart from ``modules.core.exceptions``: ``rest_framework.views``
loads the default authentication classes on import, and those import the
domain errors.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainError

logger = structlog.get_logger(__name__)


def _body(error_type: str, errors: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": error_type, "errors": errors, "error": errors[0]["detail"]}


def _flatten_drf_detail(
    detail: Any, attr: Optional[str] = None
) -> List[Dict[str, Any]]:
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            field = key if key != "non_field_errors" else None
            errors.extend(_flatten_drf_detail(value, field))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten_drf_detail(item, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER`` producing the standard error body."""
    if isinstance(exc, DomainError):
        logger.info(
            "api.domain_error",
            code=exc.code,
            attr=exc.attr,
            view=_view_name(context),
        )
        return Response(
            _body(
                "client_error",
                [{"code": exc.code, "detail": exc.detail, "attr": exc.attr}],
            ),
            status=exc.status_code,
        )

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()

    response = exception_handler(exc, context)
    if response is not None:
        errors = _flatten_drf_detail(exc.detail) or [
            {"code": "error", "detail": str(exc), "attr": None}
        ]
        response.data = _body("client_error", errors)
        return response

    logger.exception(
        "api.unhandled_exception",
        view=_view_name(context),
        error_class=exc.__class__.__name__,
    )
    return Response(
        _body(
            "server_error",
            [
                {
                    "code": "server_error",
                    "detail": "Interner Serverfehler.",
                    "attr": None,
                }
            ],
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _view_name(context: Dict[str, Any]) -> str:
    view = context.get("view")
    return view.__class__.__name__ if view is not None else ""

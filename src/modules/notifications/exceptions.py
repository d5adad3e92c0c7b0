"""Notification exceptions."""

from __future__ import annotations


class MailDeliveryFailed(Exception):
    """The mail provider did not accept a message.

    Never surfaces as a request failure: callers downgrade it to a warning.
    """

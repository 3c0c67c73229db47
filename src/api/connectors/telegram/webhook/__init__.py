"""Webhook Telegram: parsing seguro do corpo recebido."""

from .receive import InvalidUpdateError, parse_update_request

__all__ = [
    "InvalidUpdateError",
    "parse_update_request",
]

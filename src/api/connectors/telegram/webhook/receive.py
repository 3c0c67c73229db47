"""Parse e validação inicial do corpo de um webhook do Telegram."""

from __future__ import annotations

import json
from typing import Any


class InvalidUpdateError(ValueError):
    """Corpo do webhook não é um documento de update válido."""


def parse_update_request(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo bruto como documento JSON de update.

    Args:
        raw_body: Corpo completo do request

    Raises:
        InvalidUpdateError: Se o JSON estiver inválido ou não for objeto

    Returns:
        Update como dict
    """
    try:
        update = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidUpdateError("invalid_json") from exc

    if not isinstance(update, dict):
        raise InvalidUpdateError("update_not_object")

    return update

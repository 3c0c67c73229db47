"""Normalizer Telegram — converte updates brutos em NormalizedEvent."""

from __future__ import annotations

import logging
from typing import Any

from app.domain.update import NormalizedEvent
from utils.errors import UndefinedEventTypeError

from .extractor import extract_update

logger = logging.getLogger(__name__)


def normalize_update(update: dict[str, Any]) -> NormalizedEvent:
    """Classifica o update em (tipo, subtipo, payload).

    Args:
        update: Documento JSON recebido (polling ou webhook)

    Returns:
        NormalizedEvent com payload referenciando o objeto original

    Raises:
        UndefinedEventTypeError: Se nenhuma chave de evento for reconhecida
    """
    extracted = extract_update(update)
    if extracted["type"] is None:
        logger.warning(
            "update_type_undefined",
            extra={"update_id": update.get("update_id"), "keys": sorted(update)},
        )
        raise UndefinedEventTypeError(update.get("update_id"))

    return NormalizedEvent(
        type=extracted["type"],
        sub_type=extracted["sub_type"],
        payload=extracted["payload"],
    )

"""Extrator de updates da Telegram Bot API.

Estrutura do update:
- update_id
- exatamente uma chave de evento (message, callback_query, inline_query, ...)

A varredura percorre o catálogo completo e a última chave presente
sobrescreve as anteriores; o mesmo vale para os subtipos de message.
"""

from __future__ import annotations

from typing import Any

from app.constants.telegram import MESSAGE_SUBTYPES, UPDATE_TYPES, EventType, MessageSubType


def extract_event_type(update: dict[str, Any]) -> tuple[EventType | None, dict[str, Any] | None]:
    """Retorna (tipo, payload) do update ou (None, None) se nada reconhecido."""
    event_type: EventType | None = None
    payload: dict[str, Any] | None = None
    for key in UPDATE_TYPES:
        if update.get(key):
            event_type = key
            payload = update[key]
    return event_type, payload


def extract_message_subtype(message: dict[str, Any]) -> MessageSubType | None:
    """Retorna o último subtipo de conteúdo presente na mensagem."""
    sub_type: MessageSubType | None = None
    for key in MESSAGE_SUBTYPES:
        if message.get(key):
            sub_type = key
    return sub_type


def extract_update(update: dict[str, Any]) -> dict[str, Any]:
    """Extrai tipo, subtipo e payload para estrutura intermediária.

    Não levanta exceção: chaves ausentes resultam em valores None.
    """
    event_type, payload = extract_event_type(update)
    sub_type = None
    if event_type == EventType.MESSAGE and payload is not None:
        sub_type = extract_message_subtype(payload)
    return {"type": event_type, "sub_type": sub_type, "payload": payload}

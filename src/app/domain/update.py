"""Modelo normalizado de um update recebido da Bot API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.constants.telegram import EventType, MessageSubType


@dataclass(frozen=True, slots=True)
class NormalizedEvent:
    """Update classificado em (tipo, subtipo, payload).

    Attributes:
        type: Chave de topo reconhecida no update
        sub_type: Subtipo da mensagem (apenas quando type == message)
        payload: Objeto associado à chave de topo, sem cópia
    """

    type: EventType
    payload: dict[str, Any] = field(default_factory=dict)
    sub_type: MessageSubType | None = None

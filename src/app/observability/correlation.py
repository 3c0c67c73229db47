"""Gerenciamento de correlation_id para rastreamento de updates.

Cada update despachado roda sob ``update-<update_id>``; entregas de webhook
com header ``x-correlation-id`` usam o valor recebido para o ciclo HTTP.
Usa ContextVar para ser async-safe: despachos concorrentes não se misturam.

Uso:
    from app.observability import get_correlation_id, set_correlation_id

    token = set_correlation_id(update_correlation_id(update["update_id"]))
    try:
        # despachar update
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import Any

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def update_correlation_id(update_id: Any) -> str:
    """Correlation_id estável para um update (``update-<id>``)."""
    if update_id is None:
        return generate_correlation_id()
    return f"update-{update_id}"

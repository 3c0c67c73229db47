"""Sessão em memória por usuário e chat.

ATENÇÃO: sem persistência entre reinícios. O mapa é fornecido pelo
consumidor e vive enquanto ele o mantiver.

Chave padrão: ``"<from.id>:<chat.id>"``. Eventos sem remetente ou sem chat
não recebem sessão (``ctx.session`` permanece None).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.coordinators.telegram.context import EventContext
    from app.protocols import Middleware, Next

logger = logging.getLogger(__name__)

SessionKeyFn = Callable[["EventContext"], str | None]


def default_session_key(ctx: EventContext) -> str | None:
    """Monta ``"<from.id>:<chat.id>"`` a partir do payload do evento."""
    sender = ctx.payload.get("from") or {}
    user_id = sender.get("id")
    chat_id = ctx.chat_id
    if user_id is None or chat_id is None:
        return None
    return f"{user_id}:{chat_id}"


def memory_session(
    store: MutableMapping[str, dict[str, Any]] | None = None,
    key_fn: SessionKeyFn = default_session_key,
) -> Middleware:
    """Cria middleware que carrega e grava ``ctx.session`` em ``store``.

    A sessão é carregada antes da continuação e gravada depois dela; atribuir
    ``None`` a ``ctx.session`` remove a entrada.

    Args:
        store: Mapa de sessões (novo dict se None)
        key_fn: Função que deriva a chave a partir do contexto

    Returns:
        Middleware de sessão
    """
    sessions: MutableMapping[str, dict[str, Any]] = store if store is not None else {}

    async def session_middleware(ctx: EventContext, next_: Next) -> None:
        key = key_fn(ctx)
        if key is None:
            await next_()
            return

        ctx.session = sessions.get(key) or {}
        await next_()

        if ctx.session is None:
            sessions.pop(key, None)
            logger.debug("session_cleared", extra={"session_key": key})
        else:
            sessions[key] = ctx.session

    return session_middleware

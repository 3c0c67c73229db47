"""Composição de middlewares no modelo "cebola".

Cada middleware recebe ``(ctx, next_)``. O código antes de ``await next_()``
roda na ida; o código depois roda na volta, em ordem inversa de registro,
somente após tudo que estiver aninhado na continuação ter terminado.

Exceções de qualquer estágio propagam sem alteração até o dispatcher.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.coordinators.telegram.context import EventContext
    from app.protocols import Middleware, Next


async def _noop() -> None:
    return None


def _bind_stage(middleware: Middleware, ctx: EventContext, next_: Next) -> Next:
    async def stage() -> None:
        await middleware(ctx, next_)

    return stage


def compose(middlewares: Sequence[Middleware]) -> Middleware:
    """Compõe uma sequência de middlewares em um único middleware.

    A cadeia é montada da direita para a esquerda a partir da continuação
    terminal (``next_`` recebido ou no-op). Sequência vazia colapsa para a
    própria continuação.

    Args:
        middlewares: Middlewares em ordem de registro

    Returns:
        Middleware composto com a mesma assinatura ``(ctx, next_)``
    """
    chain = tuple(middlewares)

    async def composed(ctx: EventContext, next_: Next | None = None) -> None:
        continuation: Next = next_ or _noop
        for middleware in reversed(chain):
            continuation = _bind_stage(middleware, ctx, continuation)
        await continuation()

    return composed


def _as_type_set(event_types: str | Iterable[str]) -> frozenset[str]:
    if isinstance(event_types, str):
        return frozenset({event_types})
    return frozenset(event_types)


def gated_on(event_types: str | Iterable[str], *middlewares: Middleware) -> Middleware:
    """Estágio condicional por tipo ou subtipo do evento.

    Se ``ctx.event_type`` ou ``ctx.event_sub_type`` pertence a ``event_types``,
    executa a composição de ``middlewares`` e depois continua a cadeia
    externa; caso contrário segue direto para a continuação. Um curto-circuito
    dentro da cadeia interna não interrompe a externa.
    """
    accepted = _as_type_set(event_types)
    inner = compose(middlewares)

    async def gate(ctx: EventContext, next_: Next) -> None:
        if ctx.event_type in accepted or ctx.event_sub_type in accepted:
            await inner(ctx)
        await next_()

    return gate


def hears(trigger: str | re.Pattern[str], *middlewares: Middleware) -> Middleware:
    """Estágio disparado por texto de mensagem.

    Strings são casadas literalmente; padrões compilados são usados como
    estão. Em caso de match, ``ctx.match`` recebe o resultado de
    ``re.search`` antes de rodar ``middlewares``.
    """
    pattern = trigger if isinstance(trigger, re.Pattern) else re.compile(re.escape(trigger))
    inner = compose(middlewares)

    async def on_text(ctx: EventContext, next_: Next) -> None:
        text = (ctx.payload or {}).get("text") or ""
        result = pattern.search(text)
        if result:
            ctx.match = result
            await inner(ctx)
        await next_()

    return gated_on("text", on_text)

"""Dispatcher de updates: normaliza, constrói contexto, roda a cadeia.

Fluxo:
1. normalize_update (falha rápida com UndefinedEventTypeError)
2. build_context (senders ligados ao invoker ou ao sink do webhook)
3. compose(middlewares) e execução
4. Sucesso de update vindo do polling: avança o cursor para update_id + 1

Updates entregues por webhook ou despachados avulsos nunca movem o cursor;
o bot impede que os dois transportes rodem ao mesmo tempo.
"""

from __future__ import annotations

import inspect
import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.normalizers.telegram import normalize_update
from app.coordinators.telegram.composer import compose
from app.coordinators.telegram.context import build_context
from app.observability import (
    record_latency,
    reset_correlation_id,
    set_correlation_id,
    update_correlation_id,
)

if TYPE_CHECKING:
    from api.connectors.telegram.methods import TelegramApi
    from app.protocols import ErrorHandler, Middleware, ResponseSinkProtocol

logger = logging.getLogger(__name__)


@dataclass
class PollingState:
    """Estado do transporte de polling.

    Attributes:
        offset: Próximo update_id não consumido (só cresce)
        started: Loop ativo; checado a cada reentrada
        timeout_seconds: Timeout de long polling enviado ao getUpdates
        limit: Máximo de updates por lote
    """

    offset: int = 0
    started: bool = False
    timeout_seconds: int = 0
    limit: int = 100

    def advance(self, update_id: int) -> None:
        """Move o cursor para depois de ``update_id`` sem nunca recuar."""
        self.offset = max(self.offset, update_id + 1)


def default_error_handler(exc: BaseException) -> None:
    """Loga o traceback formatado e relança a exceção."""
    logger.error(
        "dispatch_failed",
        exc_info=exc,
        extra={"error_type": type(exc).__name__},
    )
    raise exc


class UpdateDispatcher:
    """Orquestra normalizer → context builder → composer para cada update."""

    def __init__(
        self,
        api: TelegramApi,
        middlewares: Sequence[Middleware],
        polling: PollingState,
        *,
        webhook_answer: bool = True,
        error_handler: ErrorHandler | None = None,
        context_extras: Mapping[str, Any] | None = None,
    ) -> None:
        """Inicializa o dispatcher.

        Args:
            api: Catálogo outbound sobre o remote invoker
            middlewares: Lista de middlewares registrada (lida a cada despacho)
            polling: Estado compartilhado do cursor de polling
            webhook_answer: Habilita resposta inline via webhook
            error_handler: Handler único de erros da cadeia (sync ou async)
            context_extras: Atributos extras expostos em todo contexto
        """
        self._api = api
        self._middlewares = middlewares
        self._polling = polling
        self._webhook_answer = webhook_answer
        self._context_extras = context_extras if context_extras is not None else {}
        self.error_handler: ErrorHandler = error_handler or default_error_handler

    @property
    def polling(self) -> PollingState:
        return self._polling

    async def dispatch(
        self,
        update: Mapping[str, Any],
        *,
        response_sink: ResponseSinkProtocol | None = None,
        correlation_id: str | None = None,
        advance_cursor: bool = True,
    ) -> None:
        """Despacha um update pela cadeia de middlewares.

        Args:
            update: Update bruto (polling ou webhook)
            response_sink: Resposta aberta do webhook; None para polling
            correlation_id: Id herdado do transporte; padrão "update-<update_id>"
            advance_cursor: Falso para despachos avulsos, fora do polling

        Raises:
            UndefinedEventTypeError: Se o update não tiver tipo reconhecido
            Exception: O que o error handler relançar
        """
        update_id = update.get("update_id")
        token = set_correlation_id(correlation_id or update_correlation_id(update_id))
        started_at = time.perf_counter()
        try:
            event = normalize_update(dict(update))
            logger.debug(
                "update_received",
                extra={
                    "update_id": update_id,
                    "event_type": str(event.type),
                    "event_sub_type": str(event.sub_type or "--"),
                    "transport": "polling" if response_sink is None else "webhook",
                },
            )
            ctx = build_context(
                event,
                update,
                self._api,
                response_sink=response_sink,
                webhook_answer=self._webhook_answer,
                extras=self._context_extras,
            )
            chain = compose(list(self._middlewares))
            try:
                await chain(ctx)
            except Exception as exc:
                # o handler padrão relança; se o consumidor suprimir, o update conta como consumido
                await self.handle_error(exc)
                logger.warning(
                    "dispatch_error_suppressed",
                    extra={"update_id": update_id, "error_type": type(exc).__name__},
                )

            if advance_cursor and response_sink is None and isinstance(update_id, int):
                self._polling.advance(update_id)

            logger.info(
                "update_dispatched",
                extra={"update_id": update_id, "event_type": str(event.type)},
            )
        finally:
            record_latency("dispatcher", "dispatch", (time.perf_counter() - started_at) * 1000)
            reset_correlation_id(token)

    async def handle_error(self, exc: BaseException) -> None:
        """Delegação ao error handler configurado (aceita corrotinas)."""
        result = self.error_handler(exc)
        if inspect.isawaitable(result):
            await result

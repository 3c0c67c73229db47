"""Fachada do bot Telegram.

Reúne settings, lista de middlewares, estado de polling, error handler,
dispatcher e transportes. Métodos do catálogo outbound (``send_message``,
``get_me``, ...) são delegados ao TelegramApi.

Uso:
    bot = TelegramBot(get_telegram_settings())
    bot.hears("oi", greet)
    bot.on("callback_query", on_button)
    task = bot.start_polling()

Apenas um transporte pode dirigir o bot: polling e webhook são mutuamente
exclusivos (TransportConflictError).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from api.connectors.telegram.http_client import create_telegram_http_client
from api.connectors.telegram.methods import TelegramApi
from api.routes.telegram.webhook import WebhookEndpoint, create_webhook_router
from app.coordinators.telegram.composer import gated_on, hears
from app.coordinators.telegram.dispatcher import PollingState, UpdateDispatcher
from app.coordinators.telegram.polling import PollingLoop
from utils.errors import TransportConflictError

if TYPE_CHECKING:
    import re

    from fastapi import APIRouter

    from api.connectors.telegram.input_file import InputFile
    from api.routes.telegram.webhook import Fallback
    from app.protocols import ErrorHandler, Middleware, RemoteInvokerProtocol
    from config.settings import TelegramSettings

logger = logging.getLogger(__name__)


class TelegramBot:
    """Runtime de despacho de eventos para um bot Telegram."""

    def __init__(
        self,
        settings: TelegramSettings,
        *,
        invoker: RemoteInvokerProtocol | None = None,
    ) -> None:
        """Inicializa o bot.

        Args:
            settings: Configurações do canal
            invoker: Remote invoker; padrão é o cliente HTTP da Bot API
        """
        self.settings = settings
        self.api = TelegramApi(
            invoker or create_telegram_http_client(settings),
            settings.file_base_url,
        )
        # extras expostos em todo EventContext (ctx.<nome>)
        self.context: dict[str, Any] = {}
        self.middlewares: list[Middleware] = []
        self.polling = PollingState(
            timeout_seconds=settings.polling_timeout_seconds,
            limit=settings.polling_limit,
        )
        self.dispatcher = UpdateDispatcher(
            self.api,
            self.middlewares,
            self.polling,
            webhook_answer=settings.webhook_answer,
            context_extras=self.context,
        )
        self._poller = PollingLoop(
            self.api,
            self.dispatcher,
            backoff_seconds=settings.polling_backoff_seconds,
        )
        self._polling_task: asyncio.Task[None] | None = None
        self._webhook: WebhookEndpoint | None = None

    # ── Registro ────────────────────────────────────────────────────────────

    @property
    def on_error(self) -> ErrorHandler:
        return self.dispatcher.error_handler

    @on_error.setter
    def on_error(self, handler: ErrorHandler) -> None:
        self.dispatcher.error_handler = handler

    def use(self, *middlewares: Middleware) -> TelegramBot:
        """Anexa middlewares ao fim da cadeia."""
        self.middlewares.extend(middlewares)
        return self

    def on(self, event_types: str | Iterable[str], *middlewares: Middleware) -> TelegramBot:
        """Registra middlewares restritos a tipos ou subtipos de evento."""
        return self.use(gated_on(event_types, *middlewares))

    def hears(self, trigger: str | re.Pattern[str], *middlewares: Middleware) -> TelegramBot:
        """Registra middlewares disparados por texto de mensagem."""
        return self.use(hears(trigger, *middlewares))

    async def handle_update(self, update: dict[str, Any]) -> None:
        """Despacha um update avulso, fora de qualquer transporte.

        O cursor do polling pertence só ao loop de polling e não é movido.
        """
        await self.dispatcher.dispatch(update, advance_cursor=False)

    # ── Transportes ─────────────────────────────────────────────────────────

    @property
    def polling_running(self) -> bool:
        task = self._polling_task
        return self.polling.started or (task is not None and not task.done())

    @property
    def webhook_active(self) -> bool:
        return self._webhook is not None

    def start_polling(
        self,
        timeout: int | None = None,
        limit: int | None = None,
    ) -> asyncio.Task[None]:
        """Inicia o loop de polling como task do event loop corrente.

        Chamadas repetidas com o loop ativo devolvem a mesma task.

        Raises:
            TransportConflictError: Se o webhook já estiver ativo
        """
        if self._webhook is not None:
            raise TransportConflictError("webhook transport already active")
        if self.polling_running:
            return self._polling_task

        if timeout is not None:
            self.polling.timeout_seconds = timeout
        if limit is not None:
            self.polling.limit = limit

        self.polling.started = True
        self._polling_task = asyncio.create_task(self._poller.run(), name="telegram-polling")
        self._polling_task.add_done_callback(_log_polling_outcome)
        return self._polling_task

    def stop(self) -> None:
        """Sinaliza parada do polling; o despacho em andamento termina."""
        self._poller.stop()

    async def aclose(self) -> None:
        """Para o polling e aguarda a task.

        Um despacho em andamento termina normalmente; só a espera no
        getUpdates (ou no backoff) é cancelada.
        """
        self.stop()
        task = self._polling_task
        if task is None or task.done():
            return
        if not self._poller.dispatching:
            task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    def webhook_endpoint(
        self,
        path: str | None = None,
        fallback: Fallback | None = None,
    ) -> WebhookEndpoint:
        """Ativa o transporte webhook e devolve o endpoint HTTP.

        Raises:
            TransportConflictError: Se o polling estiver ativo
        """
        if self.polling_running:
            raise TransportConflictError("polling transport already active")
        self._webhook = WebhookEndpoint(
            self.dispatcher,
            path if path is not None else self.settings.webhook_path,
            fallback,
        )
        logger.info("webhook_transport_enabled", extra={"path": self._webhook.path})
        return self._webhook

    def webhook_router(
        self,
        path: str | None = None,
        fallback: Fallback | None = None,
    ) -> APIRouter:
        """Router FastAPI catch-all para o webhook (incluir por último)."""
        return create_webhook_router(self.webhook_endpoint(path, fallback))

    async def set_webhook(self, url: str, certificate: InputFile | None = None) -> Any:
        return await self.api.set_webhook(url, certificate)

    async def remove_webhook(self) -> Any:
        return await self.api.remove_webhook()

    def __getattr__(self, name: str) -> Any:
        # catálogo outbound: bot.send_message(...), bot.get_me(), ...
        if name.startswith("_") or name == "api":
            raise AttributeError(name)
        return getattr(self.api, name)


def _log_polling_outcome(task: asyncio.Task[None]) -> None:
    if task.cancelled():
        logger.info("polling_task_cancelled")
        return
    exc = task.exception()
    if exc is not None:
        logger.error("polling_task_failed", exc_info=exc)

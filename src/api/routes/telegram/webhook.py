"""Endpoint de webhook do Telegram.

Montado como rota catch-all: só ``POST`` no caminho configurado é aceito.
Demais requests vão para o ``fallback`` (se houver) ou recebem 403.

Fluxo:
1. Lê o corpo inteiro e parseia JSON (inválido ou não-objeto → 415)
2. Despacha com um WebhookResponseSink novo
3. Sucesso → 200 com a chamada sequestrada (campo ``method``) ou vazio
4. Erro no despacho → 500, a menos que o sink já tenha sido consumido

Mapeamento de status:
- 200: update processado
- 403: método ou caminho não aceitos, sem fallback
- 415: corpo não é um update JSON
- 500: erro não tratado no despacho
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.telegram.response_sink import WebhookResponseSink
from api.connectors.telegram.webhook import InvalidUpdateError, parse_update_request
from app.observability import (
    get_correlation_id,
    record_webhook_status,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from app.coordinators.telegram.dispatcher import UpdateDispatcher

logger = logging.getLogger(__name__)

Fallback = Callable[[Request], Response | Awaitable[Response]]

_ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class WebhookEndpoint:
    """Transporte push: recebe um update por request HTTP."""

    def __init__(
        self,
        dispatcher: UpdateDispatcher,
        path: str = "/",
        fallback: Fallback | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._path = path
        self._fallback = fallback

    @property
    def path(self) -> str:
        return self._path

    def accepts(self, request: Request) -> bool:
        return request.method == "POST" and request.url.path == self._path

    async def handle(self, request: Request) -> Response:
        """Processa uma entrega de webhook e devolve a resposta HTTP."""
        if not self.accepts(request):
            return await self._reject(request)

        token = set_correlation_id(request.headers.get("x-correlation-id"))
        try:
            response = await self._receive(request)
        finally:
            reset_correlation_id(token)

        record_webhook_status(response.status_code, hijacked=_is_hijacked(response))
        return response

    async def _reject(self, request: Request) -> Response:
        if self._fallback is not None:
            result = self._fallback(request)
            if inspect.isawaitable(result):
                result = await result
            return result

        logger.info(
            "webhook_request_rejected",
            extra={"method": request.method, "path": request.url.path},
        )
        record_webhook_status(status.HTTP_403_FORBIDDEN)
        return Response(status_code=status.HTTP_403_FORBIDDEN)

    async def _receive(self, request: Request) -> Response:
        raw_body = await request.body()
        try:
            update = parse_update_request(raw_body)
        except InvalidUpdateError as exc:
            logger.warning(
                "webhook_invalid_update",
                extra={"reason": str(exc), "body_size": len(raw_body)},
            )
            await self._report(exc)
            return Response(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

        sink = WebhookResponseSink()
        header_cid = request.headers.get("x-correlation-id")
        try:
            await self._dispatcher.dispatch(
                update,
                response_sink=sink,
                correlation_id=header_cid,
            )
        except Exception as exc:
            if sink.body is not None:
                # resposta inline já gravada: é ela que vai para o Telegram
                logger.error(
                    "webhook_dispatch_failed_after_answer",
                    extra={
                        "update_id": update.get("update_id"),
                        "error_type": type(exc).__name__,
                        "correlation_id": get_correlation_id(),
                    },
                )
                return _answer_response(sink.body)

            logger.error(
                "webhook_dispatch_failed",
                extra={
                    "update_id": update.get("update_id"),
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        finally:
            sink.close()

        if sink.body is not None:
            return _answer_response(sink.body)
        return Response(status_code=status.HTTP_200_OK)

    async def _report(self, exc: InvalidUpdateError) -> None:
        """Entrega o erro de parse ao error handler do bot, uma única vez."""
        try:
            await self._dispatcher.handle_error(exc)
        except Exception as handler_exc:
            # handler padrão relança (ou o consumidor traduz o erro); o 415 já encerra a entrega
            logger.debug(
                "webhook_error_handler_reraised",
                extra={"reason": str(exc), "error_type": type(handler_exc).__name__},
            )


def _answer_response(body: dict[str, Any]) -> Response:
    try:
        return JSONResponse(content=body, status_code=status.HTTP_200_OK)
    except (TypeError, ValueError) as exc:
        logger.error(
            "webhook_answer_unserializable",
            extra={"method": body.get("method"), "error_type": type(exc).__name__},
        )
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _is_hijacked(response: Response) -> bool:
    return isinstance(response, JSONResponse)


def create_webhook_router(endpoint: WebhookEndpoint) -> APIRouter:
    """Cria router catch-all que delega todo request ao endpoint.

    Deve ser incluído depois das demais rotas da aplicação.
    """
    router = APIRouter()

    async def telegram_webhook(request: Request) -> Response:
        return await endpoint.handle(request)

    router.add_api_route(
        "/{request_path:path}",
        telegram_webhook,
        methods=_ROUTE_METHODS,
        include_in_schema=False,
    )
    return router

"""Resposta inline via webhook ("hijack" da resposta HTTP ainda aberta).

A Bot API aceita que a resposta de uma entrega de webhook contenha uma
chamada de método (JSON com o campo ``method``). Isso economiza uma segunda
requisição de rede, mas só vale para a primeira chamada do evento e nunca
para chamadas com anexos binários.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .input_file import has_input_file

if TYPE_CHECKING:
    from app.protocols import RemoteInvokerProtocol, ResponseSinkProtocol

logger = logging.getLogger(__name__)


class WebhookResponseSink:
    """Handle de uso único da resposta de uma entrega de webhook."""

    def __init__(self) -> None:
        self._body: dict[str, Any] | None = None
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def body(self) -> dict[str, Any] | None:
        """Corpo JSON gravado pela chamada sequestrada, se houve."""
        return self._body

    def answer(self, method: str, params: dict[str, Any]) -> None:
        """Grava a chamada como corpo da resposta e encerra o sink.

        Raises:
            RuntimeError: Se o sink já foi encerrado
        """
        if self._finished:
            raise RuntimeError("webhook_response_already_finished")
        self._body = {**params, "method": method}
        self._finished = True

    def close(self) -> None:
        """Encerra o sink sem corpo (resposta entregue pelo transporte)."""
        self._finished = True


class SinkAwareInvoker:
    """Invoker que responde inline pelo webhook quando possível.

    A primeira chamada sem anexos consome o sink; as demais seguem pela rede.
    """

    def __init__(
        self,
        invoker: RemoteInvokerProtocol,
        sink: ResponseSinkProtocol,
    ) -> None:
        self._invoker = invoker
        self._sink = sink

    async def invoke(
        self,
        method: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        options = {key: value for key, value in (params or {}).items() if value is not None}
        if not self._sink.finished and not has_input_file(options):
            logger.debug("telegram_invoke", extra={"method": method, "encoding": "webhook"})
            self._sink.answer(method, options)
            return None
        return await self._invoker.invoke(method, options)

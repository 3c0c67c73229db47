"""Loop de polling (getUpdates) da Bot API.

Estados: idle → fetching → dispatching → idle, ou idle → stopped.

- Falha de fetch é recuperável: log, backoff fixo e nova tentativa com o
  mesmo offset (nenhum update é perdido).
- Falha de despacho é fatal: ``started = False`` e DispatchError sobe de
  ``run()``. Não há retry infinito sobre um handler envenenado.
- Updates de um lote são despachados em sequência, na ordem de chegada, de
  modo que o cursor avança update a update.
- ``started`` é checado a cada reentrada do loop; despachos em andamento
  terminam normalmente.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.observability import record_polling_batch
from utils.errors import DispatchError, TransportFetchError

if TYPE_CHECKING:
    from api.connectors.telegram.methods import TelegramApi
    from app.coordinators.telegram.dispatcher import PollingState, UpdateDispatcher

logger = logging.getLogger(__name__)

DEFAULT_BACKOFF_SECONDS = 1.0


class PollingLoop:
    """Transporte pull: busca lotes de updates e os entrega ao dispatcher."""

    def __init__(
        self,
        api: TelegramApi,
        dispatcher: UpdateDispatcher,
        *,
        backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    ) -> None:
        self._api = api
        self._dispatcher = dispatcher
        self._backoff_seconds = backoff_seconds
        self._dispatching = False

    @property
    def state(self) -> PollingState:
        return self._dispatcher.polling

    @property
    def dispatching(self) -> bool:
        """Há um update no meio da cadeia de middlewares."""
        return self._dispatching

    async def fetch(self) -> list[dict[str, Any]]:
        """Busca o próximo lote a partir do cursor atual.

        Raises:
            TransportFetchError: Qualquer falha de rede ou da Bot API
        """
        state = self.state
        try:
            return await self._api.get_updates(state.offset, state.limit, state.timeout_seconds)
        except Exception as exc:
            raise TransportFetchError(state.offset, type(exc).__name__) from exc

    async def run(self) -> None:
        """Executa o loop enquanto ``state.started`` for verdadeiro.

        Quem inicia o transporte liga ``started`` antes de agendar ``run()``.

        Raises:
            DispatchError: Quando um update falha no despacho (loop parado)
        """
        state = self.state
        logger.info(
            "polling_started",
            extra={"offset": state.offset, "limit": state.limit, "timeout": state.timeout_seconds},
        )

        while state.started:
            try:
                updates = await self.fetch()
            except TransportFetchError as exc:
                logger.warning(
                    "polling_fetch_failed",
                    extra={
                        "offset": exc.offset,
                        "reason": exc.reason,
                        "backoff_seconds": self._backoff_seconds,
                    },
                )
                await asyncio.sleep(self._backoff_seconds)
                continue

            record_polling_batch(len(updates), state.offset)
            for update in updates:
                if not state.started:
                    # restante do lote volta no próximo getUpdates
                    break
                await self._dispatch_or_stop(update)

        logger.info("polling_stopped", extra={"offset": state.offset})

    async def _dispatch_or_stop(self, update: dict[str, Any]) -> None:
        self._dispatching = True
        try:
            await self._dispatcher.dispatch(update)
        except Exception as exc:
            self.state.started = False
            logger.error(
                "polling_dispatch_failed",
                extra={
                    "update_id": update.get("update_id"),
                    "offset": self.state.offset,
                    "error_type": type(exc).__name__,
                },
            )
            raise DispatchError(update.get("update_id")) from exc
        finally:
            self._dispatching = False

    def stop(self) -> None:
        """Sinaliza parada; efetiva na próxima reentrada do loop."""
        self.state.started = False

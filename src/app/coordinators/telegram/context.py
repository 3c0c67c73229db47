"""Contexto de execução por evento e seu builder.

O payload do evento fica acessível por um acessor tipado, resolvido por
tabela de lookup a partir do tipo do evento: ``ctx.callback_query`` (ou
``ctx.callbackQuery``) só existe quando o evento é um callback_query.

Atalhos de envio (``reply``, ``reply_with_photo``, ...) chegam pré-preenchidos
com o chat_id resolvido; sem chat_id, não existem.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.telegram.response_sink import SinkAwareInvoker
from app.constants.telegram import CHAT_METHODS, QUERY_METHODS, UPDATE_TYPES, EventType

if TYPE_CHECKING:
    import re

    from api.connectors.telegram.methods import ChatId, TelegramApi
    from app.constants.telegram import MessageSubType
    from app.domain.update import NormalizedEvent
    from app.protocols import ResponseSinkProtocol

logger = logging.getLogger(__name__)


def camelize(name: str) -> str:
    """Converte snake_case em camelCase (callback_query -> callbackQuery)."""
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


# Nome do acessor -> tipo de evento cujo payload ele expõe
PAYLOAD_ACCESSORS: dict[str, EventType] = {
    name: event_type
    for event_type in UPDATE_TYPES
    for name in (event_type.value, camelize(event_type.value))
}


class EventContext:
    """Contexto efêmero de um único update despachado.

    Attributes:
        event_type: Tipo do evento
        event_sub_type: Subtipo (apenas para message)
        state: Dict mutável de rascunho, descartado ao fim do despacho
        update: Update bruto recebido
        api: Catálogo outbound (sempre pela rede)
        match: Resultado do último hears() que casou
        session: Sessão do usuário (middleware memory_session)
    """

    __slots__ = (
        "_chat_id",
        "_extras",
        "_payload",
        "_senders",
        "api",
        "event_sub_type",
        "event_type",
        "match",
        "session",
        "state",
        "update",
    )

    def __init__(
        self,
        *,
        event_type: EventType,
        event_sub_type: MessageSubType | None,
        payload: dict[str, Any],
        update: Mapping[str, Any],
        api: TelegramApi,
        chat_id: ChatId | None = None,
        senders: dict[str, Callable[..., Any]] | None = None,
        extras: Mapping[str, Any] | None = None,
    ) -> None:
        self._payload = payload
        self._chat_id = chat_id
        self._senders = dict(senders or {})
        self._extras = dict(extras or {})
        self.event_type = event_type
        self.event_sub_type = event_sub_type
        self.update = update
        self.api = api
        self.state: dict[str, Any] = {}
        self.match: re.Match[str] | None = None
        self.session: dict[str, Any] | None = None

    @property
    def payload(self) -> dict[str, Any]:
        return self._payload

    @property
    def chat_id(self) -> ChatId | None:
        return self._chat_id

    @property
    def update_id(self) -> Any:
        return self.update.get("update_id")

    def has_sender(self, name: str) -> bool:
        return name in self._senders

    def __getattr__(self, name: str) -> Any:
        # Só é chamado quando o atributo não existe nos slots
        if name.startswith("_"):
            raise AttributeError(name)
        event_type = PAYLOAD_ACCESSORS.get(name)
        if event_type is not None and event_type == self.event_type:
            return self._payload
        if name in self._senders:
            return self._senders[name]
        if name in self._extras:
            return self._extras[name]
        raise AttributeError(
            f"'{type(self).__name__}' has no attribute '{name}' for event '{self.event_type}'"
        )

    def __repr__(self) -> str:
        return (
            f"EventContext(event_type={self.event_type!s}, "
            f"event_sub_type={self.event_sub_type!s}, chat_id={self._chat_id!r})"
        )


def resolve_chat_id(payload: Mapping[str, Any]) -> ChatId | None:
    """Resolve o chat de origem: payload.chat.id, senão payload.message.chat.id."""
    chat = payload.get("chat") or {}
    message = payload.get("message") or {}
    return chat.get("id") or (message.get("chat") or {}).get("id")


def build_context(
    event: NormalizedEvent,
    update: Mapping[str, Any],
    api: TelegramApi,
    *,
    response_sink: ResponseSinkProtocol | None = None,
    webhook_answer: bool = True,
    extras: Mapping[str, Any] | None = None,
) -> EventContext:
    """Constrói o EventContext de um evento normalizado.

    Args:
        event: Evento normalizado
        update: Update bruto
        api: Catálogo outbound sobre o remote invoker
        response_sink: Resposta aberta do webhook (None no polling)
        webhook_answer: Se True, a primeira chamada elegível responde inline
        extras: Atributos extras expostos no contexto (somente leitura)

    Returns:
        Contexto pronto para a cadeia de middlewares
    """
    payload = event.payload
    sender_api = api
    if response_sink is not None and webhook_answer:
        sender_api = api.bind(SinkAwareInvoker(api.invoker, response_sink))

    senders: dict[str, Callable[..., Any]] = {}

    chat_id = resolve_chat_id(payload)
    if chat_id:
        for name, target in CHAT_METHODS:
            senders[name] = functools.partial(getattr(sender_api, target), chat_id)

    query_method = QUERY_METHODS.get(event.type)
    if query_method is not None:
        name, target = query_method
        senders[name] = functools.partial(getattr(sender_api, target), payload.get("id"))

    return EventContext(
        event_type=event.type,
        event_sub_type=event.sub_type,
        payload=payload,
        update=update,
        api=api,
        chat_id=chat_id,
        senders=senders,
        extras=extras,
    )

"""Runtime de despacho de eventos do Telegram.

Componentes:
- composer: composição de middlewares (cebola), gated_on, hears
- context: EventContext e builder
- dispatcher: normalizer → context → cadeia; cursor de polling
- polling: loop getUpdates
- bot: fachada TelegramBot
"""

from app.coordinators.telegram.bot import TelegramBot
from app.coordinators.telegram.composer import compose, gated_on, hears
from app.coordinators.telegram.context import EventContext, build_context
from app.coordinators.telegram.dispatcher import (
    PollingState,
    UpdateDispatcher,
    default_error_handler,
)
from app.coordinators.telegram.polling import PollingLoop

__all__ = [
    "EventContext",
    "PollingLoop",
    "PollingState",
    "TelegramBot",
    "UpdateDispatcher",
    "build_context",
    "compose",
    "default_error_handler",
    "gated_on",
    "hears",
]

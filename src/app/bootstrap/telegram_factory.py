"""Factory de wiring para Telegram (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.telegram.http_client import create_telegram_http_client
from app.coordinators.telegram.bot import TelegramBot
from config.settings import get_telegram_settings

if TYPE_CHECKING:
    from app.protocols import RemoteInvokerProtocol
    from config.settings import TelegramSettings


def create_telegram_bot(
    settings: TelegramSettings | None = None,
    invoker: RemoteInvokerProtocol | None = None,
) -> TelegramBot:
    """Cria o bot com o invoker HTTP da Bot API (ou o invoker injetado)."""
    telegram = settings or get_telegram_settings()
    return TelegramBot(
        telegram,
        invoker=invoker or create_telegram_http_client(telegram),
    )

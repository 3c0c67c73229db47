"""Filters de logging: contexto de correlação e redação do token do bot.

O token do bot faz parte da URL de toda chamada à Bot API
(``/bot<token>/<method>``); bibliotecas HTTP logam essa URL. O
TokenRedactionFilter garante que ele nunca chegue à saída.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# /bot123456:ABC-def_ghi/  ou  /file/bot123456:ABC-def_ghi/
_BOT_TOKEN_PATTERN = re.compile(r"/bot\d+:[A-Za-z0-9_-]+")
REDACTED_TOKEN = "/bot<redacted>"


def redact_bot_token(text: str) -> str:
    """Substitui ocorrências de ``/bot<token>`` por um marcador fixo."""
    return _BOT_TOKEN_PATTERN.sub(REDACTED_TOKEN, text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via ``extra``, o valor é preservado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class TokenRedactionFilter(logging.Filter):
    """Remove o token do bot da mensagem formatada do record."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_bot_token(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True

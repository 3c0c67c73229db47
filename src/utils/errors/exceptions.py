"""Exceções do runtime de despacho de updates do Telegram.

Hierarquia:
- TelegrafoError: base de todas as falhas do runtime
  - UndefinedEventTypeError: update sem tipo reconhecido (fatal ao despacho)
  - RemoteInvocationError: Bot API respondeu ``ok: false`` (sem retry)
  - TransportFetchError: falha ao buscar updates no polling (recuperável)
  - DispatchError: exceção escapou da cadeia de middlewares (fatal ao polling)
  - TransportConflictError: tentativa de ligar dois transportes ao mesmo tempo
  - MissingBotTokenError: chamada remota sem token configurado
"""

from __future__ import annotations

from typing import Any


class TelegrafoError(RuntimeError):
    """Base para falhas do runtime."""


class UndefinedEventTypeError(TelegrafoError):
    """Nenhuma chave de evento reconhecida no update recebido."""

    def __init__(self, update_id: Any = None) -> None:
        super().__init__("Undefined update type")
        self.update_id = update_id


class RemoteInvocationError(TelegrafoError):
    """Erro estruturado retornado pela Bot API (``ok: false``)."""

    def __init__(
        self,
        error_code: int,
        description: str,
        method: str | None = None,
    ) -> None:
        super().__init__(f"{error_code}: {description}")
        self.error_code = error_code
        self.description = description
        self.method = method


class TransportFetchError(TelegrafoError):
    """Falha de rede/protocolo ao executar getUpdates."""

    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(f"getUpdates failed at offset {offset}: {reason}")
        self.offset = offset
        self.reason = reason


class DispatchError(TelegrafoError):
    """Exceção não tratada durante o despacho de um update via polling."""

    def __init__(self, update_id: Any) -> None:
        super().__init__(f"Dispatch failed for update {update_id}")
        self.update_id = update_id


class TransportConflictError(TelegrafoError):
    """Polling e webhook não podem dirigir o mesmo cursor simultaneamente."""


class MissingBotTokenError(TelegrafoError):
    """Token do bot ausente para chamadas à Bot API."""

    def __init__(self) -> None:
        super().__init__("Telegram Bot Token is required")

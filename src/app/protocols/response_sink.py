"""Protocolo da resposta HTTP ainda aberta de uma entrega via webhook."""

from __future__ import annotations

from typing import Any, Protocol


class ResponseSinkProtocol(Protocol):
    """Handle de uso único para responder a chamada remota inline."""

    @property
    def finished(self) -> bool: ...

    def answer(self, method: str, params: dict[str, Any]) -> None: ...

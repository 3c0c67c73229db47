"""Protocolos de invocação remota da Bot API.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class RemoteInvokerProtocol(Protocol):
    """Contrato mínimo para executar um método remoto da Bot API."""

    async def invoke(
        self,
        method: str,
        params: dict[str, Any] | None = None,
    ) -> Any: ...

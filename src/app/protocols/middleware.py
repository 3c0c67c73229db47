"""Contratos de middleware da cadeia de despacho.

Cada middleware recebe o contexto do evento e a continuação como argumentos
comuns. Chamar ``next_`` zero vezes interrompe a propagação sem erro; chamar
mais de uma vez tem comportamento indefinido.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.coordinators.telegram.context import EventContext

Next = Callable[[], Awaitable[None]]
Middleware = Callable[["EventContext", Next], Awaitable[None]]
ErrorHandler = Callable[[BaseException], Any]

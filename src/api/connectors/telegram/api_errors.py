"""Parsing de respostas e erros da Telegram Bot API."""

from __future__ import annotations

import logging
from typing import Any

from utils.errors import RemoteInvocationError

logger = logging.getLogger(__name__)


def parse_api_response(response_data: Any, method: str) -> Any:
    """Extrai ``result`` do envelope ``{ok, result}`` da Bot API.

    Args:
        response_data: JSON decodificado da resposta
        method: Nome do método remoto (para erro e log)

    Returns:
        Conteúdo de ``result``

    Raises:
        RemoteInvocationError: Se ``ok`` for falso ou o envelope for inválido
    """
    if not isinstance(response_data, dict):
        raise RemoteInvocationError(0, "invalid_response_envelope", method)

    if response_data.get("ok"):
        return response_data.get("result")

    error = RemoteInvocationError(
        error_code=int(response_data.get("error_code") or 0),
        description=str(response_data.get("description") or "Unknown error"),
        method=method,
    )
    log_api_error(error)
    raise error


def log_api_error(error: RemoteInvocationError) -> None:
    """Loga erro da Bot API sem expor token ou parâmetros."""
    logger.warning(
        "telegram_api_error",
        extra={
            "method": error.method,
            "error_code": error.error_code,
            "description": error.description,
        },
    )

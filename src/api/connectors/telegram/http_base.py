"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Uma tentativa por chamada: política de retry fica com o chamador.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    data=data,
                    files=files,
                    headers=merged_headers,
                    timeout=timeout or self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"error_type": type(exc).__name__})
            raise HttpError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise HttpError("http_connection_error") from exc

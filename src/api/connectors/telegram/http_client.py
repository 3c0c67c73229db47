"""Cliente HTTP especializado para a Telegram Bot API.

Estende HttpClient genérico com comportamentos específicos do Telegram:
- URL no formato {api_base_url}/bot{token}/{method}
- Corpo JSON, ou multipart quando há InputFile nos parâmetros
- Envelope {ok, result} convertido em resultado ou RemoteInvocationError
- Logging estruturado sem token
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from config.settings.telegram import TELEGRAM_API_BASE_URL, get_telegram_settings
from utils.errors import MissingBotTokenError, RemoteInvocationError

from .api_errors import parse_api_response
from .http_base import HttpClient, HttpClientConfig
from .input_file import build_multipart, has_input_file

if TYPE_CHECKING:
    import httpx

    from config.settings.telegram import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)


class TelegramHttpClient(HttpClient):
    """Remote invoker da Bot API sobre HTTP."""

    def __init__(
        self,
        token: str,
        api_base_url: str = TELEGRAM_API_BASE_URL,
        config: HttpClientConfig | None = None,
    ) -> None:
        """Inicializa cliente Telegram.

        Args:
            token: Token do bot (obtido via @BotFather)
            api_base_url: URL base da Bot API
            config: Configuração HTTP base
        """
        super().__init__(config)
        self._token = token
        self._api_base_url = api_base_url.rstrip("/")

    def method_url(self, method: str) -> str:
        """URL completa de um método da Bot API."""
        return f"{self._api_base_url}/bot{self._token}/{method}"

    async def invoke(
        self,
        method: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Executa método remoto e retorna ``result``.

        Args:
            method: Nome do método (ex: sendMessage)
            params: Parâmetros do método; valores None são descartados

        Returns:
            Conteúdo de ``result`` da resposta

        Raises:
            MissingBotTokenError: Se o token não estiver configurado
            RemoteInvocationError: Se a API responder ``ok: false``
            HttpError: Se houver falha de rede/timeout
        """
        if not self._token:
            raise MissingBotTokenError()

        options = {key: value for key, value in (params or {}).items() if value is not None}
        timeout = self._timeout_for(method, options)

        if has_input_file(options):
            logger.debug("telegram_invoke", extra={"method": method, "encoding": "multipart"})
            data, files = await asyncio.to_thread(build_multipart, options)
            response = await self.post(
                self.method_url(method), data=data, files=files, timeout=timeout
            )
        else:
            logger.debug("telegram_invoke", extra={"method": method, "encoding": "json"})
            response = await self.post(self.method_url(method), json=options, timeout=timeout)

        return self._process_response(response, method)

    def _timeout_for(self, method: str, options: dict[str, Any]) -> float:
        # long polling: a requisição precisa sobreviver ao timeout do servidor
        base = self._config.timeout_seconds
        if method == "getUpdates":
            return base + float(options.get("timeout") or 0)
        return base

    def _process_response(self, response: httpx.Response, method: str) -> Any:
        try:
            response_data = response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "telegram_response_invalid_json",
                extra={"method": method, "status_code": response.status_code},
            )
            raise RemoteInvocationError(
                response.status_code, "invalid_json_response", method
            ) from exc
        return parse_api_response(response_data, method)


def create_telegram_http_client(
    settings: TelegramSettings | None = None,
) -> TelegramHttpClient:
    """Factory para criar cliente Telegram com config padrão.

    Args:
        settings: TelegramSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para a Bot API.
    """
    telegram = settings or get_telegram_settings()
    config = HttpClientConfig(timeout_seconds=telegram.request_timeout_seconds)
    return TelegramHttpClient(
        token=telegram.bot_token,
        api_base_url=telegram.api_base_url,
        config=config,
    )

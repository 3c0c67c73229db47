"""Conector Telegram - adapter de borda para a Bot API.

Este módulo é o único ponto de IO para o canal Telegram.
Responsabilidades:
- Remote invoker HTTP (JSON ou multipart)
- Catálogo de métodos outbound
- Anexos binários (InputFile)
- Resposta inline via webhook (response sink)
- Parsing do corpo de webhook
"""

from .api_errors import parse_api_response
from .http_client import TelegramHttpClient, create_telegram_http_client
from .input_file import InputFile, build_multipart, has_input_file
from .methods import TelegramApi
from .response_sink import SinkAwareInvoker, WebhookResponseSink
from .webhook import InvalidUpdateError, parse_update_request

__all__ = [
    "InputFile",
    "InvalidUpdateError",
    "SinkAwareInvoker",
    "TelegramApi",
    "TelegramHttpClient",
    "WebhookResponseSink",
    "build_multipart",
    "create_telegram_http_client",
    "has_input_file",
    "parse_api_response",
    "parse_update_request",
]

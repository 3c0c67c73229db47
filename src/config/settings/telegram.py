"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API: credencial, transporte
(polling ou webhook) e parâmetros de cada transporte.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

# Constantes da Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"

Transport = Literal["polling", "webhook"]


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot (obtido via @BotFather)
        api_base_url: URL base da Bot API
        request_timeout_seconds: Timeout para requisições HTTP
        transport: Transporte de entrada (polling|webhook)
        webhook_path: Caminho HTTP aceito pelo endpoint de webhook
        webhook_url: URL pública registrada via setWebhook (opcional)
        webhook_answer: Permite responder inline na resposta do webhook
        polling_timeout_seconds: Timeout de long polling do getUpdates
        polling_limit: Máximo de updates por lote
        polling_backoff_seconds: Espera após falha de fetch
    """

    # Credenciais
    bot_token: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL
    request_timeout_seconds: float = 30.0

    # Transporte
    transport: Transport = "polling"

    # Webhook
    webhook_path: str = "/"
    webhook_url: str = ""
    webhook_answer: bool = True

    # Polling
    polling_timeout_seconds: int = 0
    polling_limit: int = 100
    polling_backoff_seconds: float = 1.0

    @property
    def file_base_url(self) -> str:
        """URL base para download de arquivos resolvidos por getFile."""
        return f"{self.api_base_url.rstrip('/')}/file/bot{self.bot_token}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.transport not in ("polling", "webhook"):
            errors.append("TELEGRAM_TRANSPORT deve ser 'polling' ou 'webhook'")

        if not self.webhook_path.startswith("/"):
            errors.append("TELEGRAM_WEBHOOK_PATH deve começar com '/'")

        if self.polling_timeout_seconds < 0:
            errors.append("TELEGRAM_POLLING_TIMEOUT_SECONDS deve ser >= 0")

        if not 1 <= self.polling_limit <= 100:
            errors.append("TELEGRAM_POLLING_LIMIT deve estar entre 1 e 100")

        if self.polling_backoff_seconds < 0:
            errors.append("TELEGRAM_POLLING_BACKOFF_SECONDS deve ser >= 0")

        return errors


def _parse_transport(value: str) -> Transport:
    """Converte string em Transport; valores desconhecidos caem na validação."""
    lowered = value.strip().lower()
    if lowered == "webhook":
        return "webhook"
    if lowered == "polling":
        return "polling"
    return lowered  # type: ignore[return-value]


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings a partir de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        transport=_parse_transport(os.getenv("TELEGRAM_TRANSPORT", "polling")),
        webhook_path=os.getenv("TELEGRAM_WEBHOOK_PATH", "/"),
        webhook_url=os.getenv("TELEGRAM_WEBHOOK_URL", ""),
        webhook_answer=os.getenv("TELEGRAM_WEBHOOK_ANSWER", "true").lower()
        in ("true", "1", "yes"),
        polling_timeout_seconds=int(os.getenv("TELEGRAM_POLLING_TIMEOUT_SECONDS", "0")),
        polling_limit=int(os.getenv("TELEGRAM_POLLING_LIMIT", "100")),
        polling_backoff_seconds=float(
            os.getenv("TELEGRAM_POLLING_BACKOFF_SECONDS", "1.0")
        ),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()

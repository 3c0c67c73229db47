"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
cria o bot compartilhado pela aplicação HTTP.

Uso:
    from app.bootstrap import get_telegram_bot, initialize_app

    initialize_app()

    bot = get_telegram_bot()
    bot.hears("oi", greet)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_telegram_settings

if TYPE_CHECKING:
    from app.coordinators.telegram.bot import TelegramBot

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.effective_log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())

    telegram = get_telegram_settings()
    errors.extend(f"telegram: {error}" for error in telegram.validate())
    if strict_mode and telegram.transport == "webhook" and not telegram.webhook_url:
        errors.append("telegram: TELEGRAM_WEBHOOK_URL obrigatório com transporte webhook")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_telegram_bot() -> TelegramBot:
    """Obtém o bot compartilhado (singleton)."""
    from app.bootstrap.telegram_factory import create_telegram_bot

    return create_telegram_bot()

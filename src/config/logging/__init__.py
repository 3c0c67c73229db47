"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="telegrafo")

    logger = get_logger(__name__)
    logger.info("update_dispatched", extra={"update_id": 42})

Campos obrigatórios em todo log: asctime, level, logger, message,
correlation_id, service. Nunca logar o token do bot.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    CorrelationIdFilter,
    TokenRedactionFilter,
    redact_bot_token,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "TokenRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_bot_token",
]

"""Configuração centralizada de logging.

Um único handler no root logger, com:
- JSON estruturado (python-json-logger)
- correlation_id e service injetados em todo record
- token do bot redigido das mensagens
- loggers de transporte HTTP (httpx, httpcore) contidos em WARNING

Uso:
    from config.logging import configure_logging

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", service_name="telegrafo")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, TokenRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "telegrafo"

# Logam cada request com a URL completa (que contém o token)
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização. Chamadas repetidas substituem
    o handler anterior.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual (ex: app.observability.get_correlation_id).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(TokenRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (filters do root injetam o contexto)."""
    return logging.getLogger(name)

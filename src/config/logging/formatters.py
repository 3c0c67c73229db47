"""Formatter JSON dos logs do runtime.

Todo record sai como um objeto JSON com os campos obrigatórios abaixo, mais
o que o chamador passar em ``extra`` (update_id, event_type, offset, ...).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável de saída dos campos obrigatórios
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "app.coordinators.telegram.dispatcher",
            "message": "update_dispatched",
            "correlation_id": "update-42",
            "service": "telegrafo",
            "update_id": 42,
            "event_type": "message"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)

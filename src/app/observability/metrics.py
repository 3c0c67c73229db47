"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, Loki, etc.).

Métricas suportadas:
- Latência: tempo de despacho de cada update
- Lote de polling: quantidade de updates por getUpdates
- Webhook: status HTTP devolvido por entrega

Uso:
    from app.observability import record_latency

    start = time.perf_counter()
    # ... despacho ...
    record_latency("dispatcher", "dispatch", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "dispatcher", "polling")
        operation: Nome da operação (ex: "dispatch", "fetch")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_polling_batch(size: int, offset: int) -> None:
    """Registra tamanho do lote retornado por getUpdates."""
    logger.info(
        "metric_polling_batch",
        extra={
            "metric_type": "polling_batch",
            "component": "polling",
            "batch_size": size,
            "offset": offset,
        },
    )


def record_webhook_status(status_code: int, hijacked: bool = False) -> None:
    """Registra status HTTP devolvido a uma entrega de webhook.

    Args:
        status_code: Status devolvido ao Telegram
        hijacked: True se a resposta carregou uma chamada de método inline
    """
    logger.info(
        "metric_webhook_status",
        extra={
            "metric_type": "webhook_status",
            "component": "webhook",
            "status_code": status_code,
            "hijacked": hijacked,
        },
    )

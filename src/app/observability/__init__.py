"""Observabilidade — logs estruturados, correlation_id, métricas.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_polling_batch
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
    update_correlation_id,
)
from app.observability.metrics import (
    record_latency,
    record_polling_batch,
    record_webhook_status,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_polling_batch",
    "record_webhook_status",
    "reset_correlation_id",
    "set_correlation_id",
    "update_correlation_id",
]

"""Endpoint de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from config.settings import DEFAULT_SERVICE_NAME

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    transport: str | None = None
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=DEFAULT_SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
        transport=getattr(request.app.state, "transport", None),
    )

"""Agregador de rotas — registra os routers da aplicação.

Este módulo é responsável por criar o router principal da API. O webhook
do Telegram é uma rota catch-all, por isso entra por último.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(webhook_endpoint))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.telegram.webhook import create_webhook_router

if TYPE_CHECKING:
    from api.routes.telegram.webhook import WebhookEndpoint


def create_api_router(webhook_endpoint: WebhookEndpoint | None = None) -> APIRouter:
    """Cria router principal com os sub-routers registrados.

    Args:
        webhook_endpoint: Endpoint do webhook; None quando o transporte é polling

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health na raiz)
    api_router.include_router(health_router, tags=["health"])

    if webhook_endpoint is not None:
        api_router.include_router(create_webhook_router(webhook_endpoint), tags=["telegram"])

    return api_router

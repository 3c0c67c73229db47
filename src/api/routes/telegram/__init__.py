"""Rotas HTTP do canal Telegram."""

from api.routes.telegram.webhook import WebhookEndpoint, create_webhook_router

__all__ = ["WebhookEndpoint", "create_webhook_router"]

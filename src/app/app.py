"""Entrypoint da aplicação telegrafo.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI). O transporte de
entrada vem de TELEGRAM_TRANSPORT:
- polling: o lifespan agenda o loop getUpdates e o encerra no shutdown
- webhook: o endpoint catch-all é montado depois das demais rotas

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import get_telegram_bot, initialize_app, validate_runtime_settings
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable
    from contextlib import AbstractAsyncContextManager

    from app.coordinators.telegram.bot import TelegramBot

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _build_lifespan(bot: TelegramBot) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações
        - Inicia polling ou registra a URL do webhook

        Shutdown:
        - Para o polling e aguarda a task
        """
        transport = app.state.transport
        logger.info("app_starting", extra={"transport": transport})
        validate_runtime_settings()

        if transport == "polling":
            bot.start_polling()
        elif bot.settings.webhook_url:
            try:
                await bot.set_webhook(bot.settings.webhook_url)
                logger.info("webhook_registered")
            except Exception as exc:
                logger.warning(
                    "webhook_registration_failed",
                    extra={"error_type": type(exc).__name__},
                )

        yield

        logger.info("app_shutting_down", extra={"transport": transport})
        await bot.aclose()

    return lifespan


def create_app(bot: TelegramBot | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        bot: Bot a servir; padrão é o singleton do bootstrap

    Returns:
        Aplicação FastAPI configurada.
    """
    bot = bot or get_telegram_bot()
    transport = bot.settings.transport

    fastapi_app = FastAPI(
        title="telegrafo",
        description="Runtime de despacho de eventos para bots Telegram",
        version="1.0.0",
        lifespan=_build_lifespan(bot),
    )
    fastapi_app.state.bot = bot
    fastapi_app.state.transport = transport

    webhook_endpoint = bot.webhook_endpoint() if transport == "webhook" else None
    fastapi_app.include_router(create_api_router(webhook_endpoint))

    logger.info("app_configured", extra={"transport": transport})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting telegrafo in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()

"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, health)
- Validação inicial de request (método, caminho, corpo)
- Delegação para o dispatcher
- Respostas HTTP apropriadas

Estrutura:
- routes/telegram/: webhook do Telegram
- routes/health/: liveness probe

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

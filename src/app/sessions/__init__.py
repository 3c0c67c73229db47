"""Módulo de sessões do bot.

Exporta o middleware de sessão em memória.
"""

from app.sessions.memory_session import default_session_key, memory_session

__all__ = [
    "default_session_key",
    "memory_session",
]

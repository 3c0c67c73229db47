"""Agregador de settings do telegrafo.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    Transport,
    get_telegram_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "TELEGRAM_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "TelegramSettings",
    "Transport",
    "get_base_settings",
    "get_telegram_settings",
]

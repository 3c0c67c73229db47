"""Normalizer Telegram — extração e classificação de updates da Bot API.

Responsabilidades:
- Identificar o tipo do update (message, callback_query, inline_query, ...)
- Identificar o subtipo de mensagens (text, photo, location, ...)
- Produzir NormalizedEvent para o dispatcher
"""

from .extractor import extract_event_type, extract_message_subtype, extract_update
from .normalizer import normalize_update

__all__ = [
    "extract_event_type",
    "extract_message_subtype",
    "extract_update",
    "normalize_update",
]

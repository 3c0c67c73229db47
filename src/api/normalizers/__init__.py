"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- telegram/: normalizer Telegram Bot API (tipo, subtipo e payload do update)

Cada canal tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .telegram import extract_update, normalize_update

__all__ = [
    "extract_update",
    "normalize_update",
]

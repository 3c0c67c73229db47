"""Exceções compartilhadas do runtime."""

from .exceptions import (
    DispatchError,
    MissingBotTokenError,
    RemoteInvocationError,
    TelegrafoError,
    TransportConflictError,
    TransportFetchError,
    UndefinedEventTypeError,
)

__all__ = [
    "DispatchError",
    "MissingBotTokenError",
    "RemoteInvocationError",
    "TelegrafoError",
    "TransportConflictError",
    "TransportFetchError",
    "UndefinedEventTypeError",
]

"""Protocolos e contratos do core da aplicação."""

from .invoker import RemoteInvokerProtocol
from .middleware import ErrorHandler, Middleware, Next
from .response_sink import ResponseSinkProtocol

__all__ = [
    "ErrorHandler",
    "Middleware",
    "Next",
    "RemoteInvokerProtocol",
    "ResponseSinkProtocol",
]

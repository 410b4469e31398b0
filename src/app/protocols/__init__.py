"""Protocolos e contratos do core da aplicação."""

from .publisher import PublisherProtocol

__all__ = [
    "PublisherProtocol",
]

"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DeadLetterPublishError,
    InfrastructureError,
    PublishError,
)

__all__ = [
    "DeadLetterPublishError",
    "InfrastructureError",
    "PublishError",
]

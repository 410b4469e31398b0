"""Exceções de domínio para falhas de infraestrutura do relay."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class PublishError(InfrastructureError):
    """Falha ao publicar no barramento (tópico inexistente, transporte, rejeição).

    Categoria única: o relay não distingue a causa, apenas sucesso ou falha.
    """

    def __init__(self, topic: str, reason: str) -> None:
        super().__init__(f"publish to {topic!r} failed: {reason}")
        self.topic = topic
        self.reason = reason


class DeadLetterPublishError(PublishError):
    """Falha ao publicar no tópico dead — caminho terminal, sem novo fallback."""

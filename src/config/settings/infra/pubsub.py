"""Settings do Pub/Sub.

Configurações para Google Cloud Pub/Sub.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PUBLISH_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class PubSubSettings:
    """Configurações do Pub/Sub.

    Attributes:
        dead_topic: Tópico de fallback para payloads sem rota ou com falha
        publish_timeout_seconds: Tempo máximo de espera pelo message id
    """

    dead_topic: str = ""
    publish_timeout_seconds: float = DEFAULT_PUBLISH_TIMEOUT_SECONDS

    def validate(self) -> list[str]:
        """Valida configurações do Pub/Sub.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        # Sem tópico dead o serviço não pode subir
        if not self.dead_topic:
            errors.append("DEAD_TOPIC não configurado")

        if self.publish_timeout_seconds <= 0:
            errors.append("PUBSUB_PUBLISH_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_pubsub_from_env() -> PubSubSettings:
    """Carrega PubSubSettings de variáveis de ambiente."""
    return PubSubSettings(
        dead_topic=os.getenv("DEAD_TOPIC", "").strip(),
        publish_timeout_seconds=float(
            os.getenv("PUBSUB_PUBLISH_TIMEOUT_SECONDS", str(DEFAULT_PUBLISH_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_pubsub_settings() -> PubSubSettings:
    """Retorna instância cacheada de PubSubSettings."""
    return _load_pubsub_from_env()

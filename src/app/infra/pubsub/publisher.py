"""Publisher Google Cloud Pub/Sub.

Implementa PublisherProtocol sobre `pubsub_v1.PublisherClient`. O client é
único por processo, criado no startup e compartilhado por todas as
requisições (o client cuida do próprio pool/batching e é thread-safe).
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, record_latency
from app.protocols.publisher import PublisherProtocol
from utils.errors import PublishError

if TYPE_CHECKING:
    from google.cloud.pubsub_v1 import PublisherClient

logger = logging.getLogger(__name__)


class PubSubPublisher(PublisherProtocol):
    """Publica bytes em tópicos do projeto configurado.

    Args:
        client: PublisherClient compartilhado
        project_id: Projeto GCP dono dos tópicos
        timeout_seconds: Tempo máximo de espera pelo message id
    """

    def __init__(
        self,
        client: PublisherClient,
        project_id: str,
        timeout_seconds: float | None = None,
    ) -> None:
        self._client = client
        self._project_id = project_id
        self._timeout_seconds = timeout_seconds

    def topic_path(self, topic: str) -> str:
        """Retorna o path completo projects/{project}/topics/{topic}."""
        return self._client.topic_path(self._project_id, topic)

    async def publish(self, topic: str, payload: bytes) -> str:
        """Publica e aguarda o message id.

        O future do Pub/Sub é encadeado ao loop: se a requisição for
        cancelada, a espera é cancelada junto.
        """
        started_at = time.perf_counter()
        try:
            future = self._client.publish(self.topic_path(topic), payload)
            message_id = await asyncio.wait_for(
                asyncio.wrap_future(future),
                timeout=self._timeout_seconds,
            )
        except TimeoutError as exc:
            raise PublishError(topic, "timeout") from exc
        except Exception as exc:
            # Tópico inexistente, transporte ou rejeição: categoria única
            raise PublishError(topic, type(exc).__name__) from exc
        finally:
            record_latency(
                "pubsub_publisher",
                "publish",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )

        logger.debug(
            "pubsub_message_published",
            extra={"topic": topic, "message_id": message_id, "payload_size": len(payload)},
        )
        return message_id

    async def check_topic(self, topic: str, timeout_seconds: float = 3.0) -> None:
        """Verifica se o tópico existe (usado pelo readiness probe).

        Raises:
            google.api_core.exceptions.NotFound: Se o tópico não existe.
            TimeoutError: Se a API não responder a tempo.
        """
        path = self.topic_path(topic)
        await asyncio.wait_for(
            asyncio.to_thread(self._client.get_topic, request={"topic": path}),
            timeout=timeout_seconds,
        )

    def close(self) -> None:
        """Envia mensagens pendentes e encerra o client."""
        self._client.stop()

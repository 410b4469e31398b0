"""Use case de relay: roteia o corpo bruto para o tópico do path.

Fluxo (após autenticação feita na rota):
1. Resolve o tópico a partir do path
2. Sem tópico -> dead letter
3. Publica no tópico; falha -> dead letter com corpo e path originais
4. Falha no dead letter -> DeadLetterPublishError (terminal)
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.dead_letter import DeadLetterRecord
from app.domain.topic import resolve_topic
from config.logging import log_fallback
from utils.errors import DeadLetterPublishError, PublishError

if TYPE_CHECKING:
    from app.protocols.publisher import PublisherProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resultado de um relay bem-sucedido.

    Attributes:
        message_id: ID atribuído pelo barramento (primário ou dead)
        topic: Tópico onde a mensagem foi efetivamente publicada
        dead_lettered: True se o payload foi desviado para o tópico dead
    """

    message_id: str
    topic: str
    dead_lettered: bool = False


class RelayNotificationUseCase:
    """Publica notificações no tópico do path, com fallback para o dead topic."""

    def __init__(self, publisher: PublisherProtocol, dead_topic: str) -> None:
        if not dead_topic:
            raise ValueError("dead_topic é obrigatório")
        self._publisher = publisher
        self._dead_topic = dead_topic

    @property
    def dead_topic(self) -> str:
        return self._dead_topic

    async def execute(self, body: bytes, request_path: str) -> RelayResult:
        """Roteia `body` conforme `request_path`.

        Raises:
            DeadLetterPublishError: Se o publish no tópico dead também falhar.
        """
        topic = resolve_topic(request_path)
        if topic is None:
            logger.error(
                "relay_topic_missing",
                extra={"path": request_path, "dead_topic": self._dead_topic},
            )
            log_fallback(logger, "relay", reason="no_topic")
            return await self._relay_to_dead(body, request_path)

        try:
            message_id = await self._publisher.publish(topic, body)
        except PublishError as exc:
            logger.error(
                "relay_publish_failed",
                extra={
                    "topic": topic,
                    "dead_topic": self._dead_topic,
                    "error": exc.reason,
                },
            )
            log_fallback(logger, "relay", reason="publish_failed")
            return await self._relay_to_dead(body, request_path)

        logger.info(
            "notification_published",
            extra={"topic": topic, "message_id": message_id, "payload_size": len(body)},
        )
        return RelayResult(message_id=message_id, topic=topic)

    async def send_to_dead(self, payload: bytes, request_path: str) -> str:
        """Embrulha payload e path em DeadLetterRecord e publica no tópico dead.

        Raises:
            DeadLetterPublishError: Erro do publisher, sem novo fallback.
        """
        record = DeadLetterRecord(request_path=request_path, data=payload)
        try:
            return await self._publisher.publish(self._dead_topic, record.to_bytes())
        except PublishError as exc:
            # Payload completo no log para recuperação offline
            logger.error(
                "dead_letter_publish_failed",
                extra={
                    "dead_topic": self._dead_topic,
                    "path": request_path,
                    "data": base64.b64encode(payload).decode("ascii"),
                    "error": exc.reason,
                },
            )
            raise DeadLetterPublishError(exc.topic, exc.reason) from exc

    async def _relay_to_dead(self, body: bytes, request_path: str) -> RelayResult:
        message_id = await self.send_to_dead(body, request_path)
        logger.info(
            "notification_dead_lettered",
            extra={"dead_topic": self._dead_topic, "message_id": message_id, "path": request_path},
        )
        return RelayResult(message_id=message_id, topic=self._dead_topic, dead_lettered=True)

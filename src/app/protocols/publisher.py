"""Protocolo de publicação no barramento de mensagens.

Interface estreita dependida pelo use case de relay; a implementação
concreta (Pub/Sub) vive em app/infra/pubsub.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PublisherProtocol(ABC):
    """Contrato mínimo assíncrono para publicação de bytes em um tópico.

    Método canônico:
    - publish(topic: str, payload: bytes) -> str
      Retorna o message id atribuído pelo barramento.

    Implementações devem ser seguras para uso concorrente por várias
    requisições em andamento e não fazem retry por conta própria.
    """

    @abstractmethod
    async def publish(self, topic: str, payload: bytes) -> str:
        """Publica `payload` em `topic` e aguarda o message id.

        Args:
            topic: Nome curto do tópico (ex: "orders")
            payload: Bytes a publicar, sem transformação

        Returns:
            Message id atribuído pelo barramento.

        Raises:
            PublishError: Em qualquer falha (tópico inexistente, transporte,
                rejeição do servidor, timeout).
        """

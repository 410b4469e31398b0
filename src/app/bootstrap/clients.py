"""Factories de clientes externos — Pub/Sub."""

from __future__ import annotations

import logging

from app.infra.pubsub import PubSubPublisher
from config.settings import get_base_settings, get_pubsub_settings

logger = logging.getLogger(__name__)


def create_pubsub_publisher() -> PubSubPublisher:
    """Cria o publisher Pub/Sub do processo.

    Chamado uma única vez no startup; a instância é compartilhada por
    todas as requisições concorrentes.

    Returns:
        PubSubPublisher configurado para o projeto de GCP_PROJECT
    """
    from google.cloud import pubsub_v1

    project_id = get_base_settings().gcp_project
    client = pubsub_v1.PublisherClient()
    logger.info("pubsub_client_created", extra={"project": project_id})
    return PubSubPublisher(
        client,
        project_id,
        timeout_seconds=get_pubsub_settings().publish_timeout_seconds,
    )

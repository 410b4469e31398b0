"""Integração com Google Cloud Pub/Sub."""

from __future__ import annotations

from app.infra.pubsub.publisher import PubSubPublisher

__all__ = ["PubSubPublisher"]

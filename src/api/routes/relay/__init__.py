"""Rotas de relay dos webhooks."""

from api.routes.relay.webhook import router

__all__ = ["router"]

"""Agregador de rotas — registra health e relay.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.relay import router as relay_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks primeiro: GET /health e /ready não caem no catch-all
    api_router.include_router(health_router, tags=["health"])

    # Relay: POST em qualquer path, primeiro segmento = tópico
    api_router.include_router(relay_router, tags=["relay"])

    return api_router

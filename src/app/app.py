"""Entrypoint da aplicação notify-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080

Cloud Run:
    O container deve expor a porta 8080 (padrão do Cloud Run).
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, resolve_signing_key, validate_runtime_settings
from app.bootstrap.clients import create_pubsub_publisher
from app.use_cases.relay import RelayNotificationUseCase
from config.logging import get_logger
from config.settings import get_pubsub_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols.publisher import PublisherProtocol

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def create_app(publisher: PublisherProtocol | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        publisher: Publisher a injetar (testes). Se None, o lifespan cria
            o publisher Pub/Sub do processo.

    Returns:
        Aplicação FastAPI configurada.
    """

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: valida settings, resolve a signing key e cria o publisher.

        Shutdown: faz flush do publisher criado aqui.
        """
        logger.info("app_starting")
        validate_runtime_settings()
        signing_key = resolve_signing_key()

        owned_publisher = None
        active_publisher = publisher
        if active_publisher is None:
            owned_publisher = create_pubsub_publisher()
            active_publisher = owned_publisher

        fastapi_app.state.signing_key = signing_key
        fastapi_app.state.publisher = active_publisher
        fastapi_app.state.relay_use_case = RelayNotificationUseCase(
            publisher=active_publisher,
            dead_topic=get_pubsub_settings().dead_topic,
        )

        yield

        logger.info("app_shutting_down")
        if owned_publisher is not None:
            await asyncio.to_thread(owned_publisher.close)

    fastapi_app = FastAPI(
        title="notify-relay",
        description="Relay de webhooks Alchemy Notify para Pub/Sub",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting notify-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()

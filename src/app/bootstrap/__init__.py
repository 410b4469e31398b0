"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings,
resolve a signing key e conecta o publisher concreto ao use case.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.infra.secrets import get_secret
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_alchemy_settings,
    get_base_settings,
    get_pubsub_settings,
)

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com identidade do serviço.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        service_version=base.service_version,
        project_id=base.gcp_project,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Falha rápido em qualquer ambiente: sem tópico dead, signing key ou
    projeto GCP o relay não tem como operar.

    Raises:
        RuntimeError: Com a lista de erros de configuração.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"alchemy: {error}" for error in get_alchemy_settings().validate())
    errors.extend(f"pubsub: {error}" for error in get_pubsub_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.critical(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def resolve_signing_key() -> bytes:
    """Retorna a signing key do Alchemy (env API_KEY ou Secret Manager).

    Raises:
        RuntimeError: Se a chave resolvida for vazia.
    """
    settings = get_alchemy_settings()
    key = settings.signing_key
    if not key and settings.signing_key_secret_id:
        key = get_secret(settings.signing_key_secret_id, get_base_settings().gcp_project).strip()
        logger.info("signing_key_loaded", extra={"source": "secret_manager"})

    if not key:
        raise RuntimeError("Signing key vazia: configure API_KEY ou API_KEY_SECRET_ID")
    return key.encode("utf-8")

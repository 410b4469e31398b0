"""GCP Secret Manager — leitura da signing key do Alchemy Notify.

Usado quando API_KEY não vem direto do ambiente e sim de um secret
(API_KEY_SECRET_ID). Valores ficam em cache em memória por processo.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from google.cloud.secretmanager import SecretManagerServiceClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_client() -> SecretManagerServiceClient:
    """Obtém cliente do Secret Manager (singleton via lru_cache)."""
    from google.cloud import secretmanager
    return secretmanager.SecretManagerServiceClient()


def _secret_name(secret_id: str, project_id: str, version: str) -> str:
    # Aceita tanto o ID curto quanto o resource name completo
    if secret_id.startswith("projects/"):
        return secret_id if "/versions/" in secret_id else f"{secret_id}/versions/{version}"
    return f"projects/{project_id}/secrets/{secret_id}/versions/{version}"


@lru_cache(maxsize=16)
def get_secret(
    secret_id: str,
    project_id: str,
    version: str = "latest",
) -> str:
    """Obtém valor de secret do GCP Secret Manager.

    Args:
        secret_id: ID do secret (ex.: alchemy-signing-key) ou resource name
        project_id: ID do projeto GCP
        version: Versão do secret (default: latest)

    Returns:
        Valor do secret como string

    Raises:
        ValueError: Se project_id vazio e secret_id não for resource name
        google.api_core.exceptions.NotFound: Se secret não existe
    """
    if not project_id and not secret_id.startswith("projects/"):
        msg = "GCP_PROJECT não definido para carregar secret"
        raise ValueError(msg)

    name = _secret_name(secret_id, project_id, version)
    try:
        response = _get_client().access_secret_version(request={"name": name})
    except Exception as exc:
        logger.error("secret_load_error", extra={"secret_id": secret_id, "error": str(exc)})
        raise

    logger.debug("secret_loaded", extra={"secret_id": secret_id})
    return response.payload.data.decode("UTF-8")

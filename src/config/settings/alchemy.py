"""Settings específicas do Alchemy Notify.

Configurações do provedor de webhooks (assinatura HMAC dos payloads).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Header enviado pelo Alchemy Notify em cada POST
DEFAULT_SIGNATURE_HEADER: str = "X-Alchemy-Signature"


@dataclass(frozen=True)
class AlchemySettings:
    """Configurações do Alchemy Notify.

    Attributes:
        signing_key: Signing key do dashboard Alchemy Notify (API_KEY)
        signing_key_secret_id: Secret no Secret Manager com a signing key,
            usado quando API_KEY não está definido
        signature_header: Header com o HMAC-SHA256 hex do corpo
    """

    # Credenciais (carregadas de env ou Secret Manager)
    signing_key: str = ""
    signing_key_secret_id: str = ""

    signature_header: str = DEFAULT_SIGNATURE_HEADER

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Alchemy.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_key and not self.signing_key_secret_id:
            errors.append("API_KEY ou API_KEY_SECRET_ID não configurado")

        if not self.signature_header:
            errors.append("SIGNATURE_HEADER não pode ser vazio")

        return errors


def _load_alchemy_from_env() -> AlchemySettings:
    """Carrega AlchemySettings de variáveis de ambiente."""
    return AlchemySettings(
        signing_key=os.getenv("API_KEY", ""),
        signing_key_secret_id=os.getenv("API_KEY_SECRET_ID", ""),
        signature_header=os.getenv("SIGNATURE_HEADER", DEFAULT_SIGNATURE_HEADER),
    )


@lru_cache(maxsize=1)
def get_alchemy_settings() -> AlchemySettings:
    """Retorna instância cacheada de AlchemySettings."""
    return _load_alchemy_from_env()

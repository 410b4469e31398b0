"""Validação de assinatura HMAC-SHA256 do Alchemy Notify."""

from __future__ import annotations

import hashlib
import hmac

from config.settings.alchemy import DEFAULT_SIGNATURE_HEADER

SIGNATURE_HEADER = DEFAULT_SIGNATURE_HEADER


def compute_signature(body: bytes, signing_key: bytes) -> str:
    """Retorna o HMAC-SHA256 hex (minúsculo) de `body` com `signing_key`."""
    return hmac.new(signing_key, body, hashlib.sha256).hexdigest()


def is_valid_signature(body: bytes, signature: str, signing_key: bytes) -> bool:
    """Valida o header de assinatura contra o corpo bruto.

    Args:
        body: Corpo bruto da requisição (nunca a versão re-serializada do JSON)
        signature: Valor do header X-Alchemy-Signature
        signing_key: Signing key do webhook no dashboard

    Returns:
        True se o digest hex é idêntico à assinatura (mesmo case e tamanho)
    """
    expected = compute_signature(body, signing_key)
    # Comparação em bytes: compare_digest rejeita str não-ASCII com TypeError
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))

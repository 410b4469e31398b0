"""Connector do Alchemy Notify — verificação de assinatura dos webhooks."""

from .signature import SIGNATURE_HEADER, compute_signature, is_valid_signature

__all__ = [
    "SIGNATURE_HEADER",
    "compute_signature",
    "is_valid_signature",
]

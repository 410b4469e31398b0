"""Secrets — integração com Google Cloud Secret Manager."""

from __future__ import annotations

from app.infra.secrets.gcp_secrets import get_secret

__all__ = [
    "get_secret",
]

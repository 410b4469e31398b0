"""Agregador de settings do notify-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Provider settings
from config.settings.alchemy import (
    DEFAULT_SIGNATURE_HEADER,
    AlchemySettings,
    get_alchemy_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    PubSubSettings,
    get_pubsub_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SIGNATURE_HEADER",
    # Provider
    "AlchemySettings",
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "PubSubSettings",
    "get_alchemy_settings",
    "get_base_settings",
    "get_pubsub_settings",
]

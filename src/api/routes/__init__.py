"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (relay de webhooks, health)
- Validação inicial de request (headers, assinatura)
- Delegação para use cases
- Respostas HTTP apropriadas

Estrutura:
- routes/relay/: POST /{topic} do Alchemy Notify
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

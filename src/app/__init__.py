"""App — orquestração do relay, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (clients, inicialização, wiring)
- domain/: resolução de tópico e registro de dead letter
- use_cases/: relay com fallback para o dead topic
- infra/: Pub/Sub e Secret Manager
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""

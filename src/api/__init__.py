"""API — camada de borda HTTP.

Responsabilidades:
- Receber webhooks do Alchemy Notify
- Validar header e assinatura HMAC
- Mapear resultados do relay para respostas HTTP

Subpastas:
- connectors/: adapters do provedor (assinatura)
- routes/: endpoints HTTP (relay, health)

NÃO PODE conter: roteamento de tópicos ou publicação (isso é app/).
"""

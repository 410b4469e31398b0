"""Connectors — adapters de borda para provedores externos.

Estrutura:
- alchemy/: Alchemy Notify (assinatura X-Alchemy-Signature)
"""

__all__: list[str] = []

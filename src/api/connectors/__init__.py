"""Connectors: adapters de borda para APIs externas.

Estrutura:
- twilio/: Twilio Messages API (SMS)
"""

__all__: list[str] = []

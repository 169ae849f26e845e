"""Payload builders: construção de requests para APIs externas.

Estrutura:
- sms/: Twilio Messages API (URL + form-urlencoded)
"""

__all__: list[str] = []

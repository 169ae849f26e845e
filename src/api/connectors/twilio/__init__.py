"""Conector Twilio - adapter de borda para a Messages API (SMS).

Responsabilidades:
- Autenticação HTTP Basic (account_sid:auth_token)
- Envio do POST form-urlencoded
- Logging estruturado sem credenciais
"""

from .auth import build_basic_auth_header
from .messages_client import TwilioMessagesClient

__all__ = [
    "TwilioMessagesClient",
    "build_basic_auth_header",
]

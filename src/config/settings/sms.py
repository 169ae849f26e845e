"""Settings específicas de SMS.

Configurações do canal SMS via Twilio Messages API.
Credenciais só alimentam a camada de bootstrap; o SmsSender recebe tudo
por parâmetro.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Constantes da Twilio REST API
TWILIO_API_BASE_URL: str = "https://api.twilio.com"
TWILIO_API_VERSION: str = "2010-04-01"
MESSAGES_PATH_TEMPLATE: str = "/Accounts/{account_sid}/Messages.json"


@dataclass(frozen=True)
class SmsSettings:
    """Configurações do canal SMS.

    Attributes:
        account_sid: Account SID (Twilio)
        auth_token: Auth Token (Twilio), fora do repr
        from_number: Número de origem padrão
        api_base_url: URL base da API Twilio
        api_version: Versão da API (ex: 2010-04-01)
        request_timeout_seconds: Timeout para requisições
        verify_ssl: Valida certificado TLS
    """

    # Credenciais
    account_sid: str = ""
    auth_token: str = field(default="", repr=False)
    from_number: str = ""

    # API
    api_base_url: str = TWILIO_API_BASE_URL
    api_version: str = TWILIO_API_VERSION

    # Transporte
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version.strip('/')}"

    @property
    def messages_url_template(self) -> str:
        """Template do endpoint Messages com placeholder {account_sid}."""
        return f"{self.api_endpoint}{MESSAGES_PATH_TEMPLATE}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de SMS.

        Formato dos números é checado no envio, não aqui.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.account_sid:
            errors.append("TWILIO_ACCOUNT_SID não configurado")
        if not self.auth_token:
            errors.append("TWILIO_AUTH_TOKEN não configurado")
        if not self.from_number:
            errors.append("TWILIO_FROM_NUMBER não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("TWILIO_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SmsSettings:
    """Carrega SmsSettings de variáveis de ambiente."""
    return SmsSettings(
        account_sid=os.getenv("TWILIO_ACCOUNT_SID", ""),
        auth_token=os.getenv("TWILIO_AUTH_TOKEN", ""),
        from_number=os.getenv("TWILIO_FROM_NUMBER", ""),
        api_base_url=os.getenv("TWILIO_API_BASE_URL", TWILIO_API_BASE_URL),
        api_version=os.getenv("TWILIO_API_VERSION", TWILIO_API_VERSION),
        request_timeout_seconds=float(
            os.getenv("TWILIO_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        verify_ssl=os.getenv("TWILIO_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsSettings:
    """Retorna instância cacheada de SmsSettings."""
    return _load_from_env()

"""Protocolos de validação de requisições de SMS."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SmsMessageRequest


class ValidationError(ValueError):
    """Erro de validação de parâmetros de envio.

    Attributes:
        field: Nome do parâmetro inválido
        kind: Tipo da violação ("missing" ou "invalid")
    """

    kind: str = "invalid"

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class SmsRequestValidatorProtocol(Protocol):
    """Contrato mínimo para validação de requisições de SMS."""

    def validate_sms_request(self, request: SmsMessageRequest) -> None: ...

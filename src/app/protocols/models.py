"""Modelos de request/response do envio de SMS.

Objetos efêmeros: nada aqui é persistido nem compartilhado entre chamadas.
"""

from __future__ import annotations

from dataclasses import dataclass, field

ERROR_CODE_TRANSPORT = "TRANSPORT_ERROR"
ERROR_CODE_REMOTE_REJECTION = "REMOTE_REJECTION"


@dataclass(frozen=True)
class SmsMessageRequest:
    """Requisição de envio de um SMS via Twilio.

    Campos aceitam None para que "ausente" continue distinguível de
    "vazio" na validação.

    Attributes:
        account_sid: Account SID (usuário do Basic Auth e segmento da URL)
        auth_token: Auth Token (senha do Basic Auth, nunca logado)
        from_number: Número de origem (+ opcional seguido de dígitos)
        to_number: Número de destino (mesmo formato)
        body: Texto da mensagem
    """

    account_sid: str | None
    auth_token: str | None = field(repr=False)
    from_number: str | None
    to_number: str | None
    body: str | None


@dataclass(frozen=True)
class SmsSendResult:
    """Resultado de um envio, já sem exceções."""

    success: bool
    status_code: int | None = None
    error_code: str | None = None
    error_message: str | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def sent(cls, status_code: int) -> SmsSendResult:
        return cls(success=True, status_code=status_code)

    @classmethod
    def rejected(cls, status_code: int, error_message: str) -> SmsSendResult:
        return cls(
            success=False,
            status_code=status_code,
            error_code=ERROR_CODE_REMOTE_REJECTION,
            error_message=error_message,
        )

    @classmethod
    def transport_failure(cls, error_message: str) -> SmsSendResult:
        return cls(
            success=False,
            error_code=ERROR_CODE_TRANSPORT,
            error_message=error_message,
        )

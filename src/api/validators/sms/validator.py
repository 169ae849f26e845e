"""Validador de requisições de SMS.

A ordem das checagens é fixa e para na primeira violação:
account_sid, auth_token, from_number, to_number, body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.sms.fields import (
    check_message_body,
    check_phone_number,
    check_required_text,
)

if TYPE_CHECKING:
    from api.validators.sms.errors import ValidationIssue
    from app.protocols.models import SmsMessageRequest


def check_sms_request(request: SmsMessageRequest) -> ValidationIssue | None:
    """Retorna a primeira violação da requisição, sem levantar exceção."""
    return (
        check_required_text(request.account_sid, "account_sid", "account SID")
        or check_required_text(request.auth_token, "auth_token", "auth token")
        or check_phone_number(request.from_number, "from_number", "from number")
        or check_phone_number(request.to_number, "to_number", "to number")
        or check_message_body(request.body)
    )


class SmsRequestValidator:
    """Validador padrão (estrito) de requisições de SMS."""

    def validate_sms_request(self, request: SmsMessageRequest) -> None:
        """Valida a requisição antes de qualquer IO.

        Raises:
            MissingArgumentError: Se um parâmetro obrigatório é None
            InvalidArgumentError: Se um parâmetro viola formato ou tamanho
        """
        issue = check_sms_request(request)
        if issue is not None:
            raise issue.to_exception()

"""Validators para SMS (Twilio).

Responsabilidades:
- Validar presença das credenciais (account_sid, auth_token)
- Validar formato e tamanho dos números (E.164-like, até 16 caracteres)
- Validar tamanho do texto (até 1600 caracteres)

Uso:
    from api.validators.sms import SmsRequestValidator

    SmsRequestValidator().validate_sms_request(request)
"""

from api.validators.sms.errors import (
    InvalidArgumentError,
    IssueKind,
    MissingArgumentError,
    ValidationIssue,
)
from api.validators.sms.limits import (
    MAX_BODY_LENGTH,
    MAX_PHONE_NUMBER_LENGTH,
    PHONE_NUMBER_PATTERN,
)
from api.validators.sms.validator import SmsRequestValidator, check_sms_request

__all__ = [
    "MAX_BODY_LENGTH",
    "MAX_PHONE_NUMBER_LENGTH",
    "PHONE_NUMBER_PATTERN",
    "InvalidArgumentError",
    "IssueKind",
    "MissingArgumentError",
    "SmsRequestValidator",
    "ValidationIssue",
    "check_sms_request",
]

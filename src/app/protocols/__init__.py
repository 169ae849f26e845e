"""Protocolos e contratos do core da aplicação."""

from .http_client import HttpResponseProtocol, HttpTransportProtocol
from .models import (
    ERROR_CODE_REMOTE_REJECTION,
    ERROR_CODE_TRANSPORT,
    SmsMessageRequest,
    SmsSendResult,
)
from .outbound_sender import SmsDispatcherProtocol, SmsSenderProtocol
from .validator import SmsRequestValidatorProtocol, ValidationError

__all__ = [
    "ERROR_CODE_REMOTE_REJECTION",
    "ERROR_CODE_TRANSPORT",
    "HttpResponseProtocol",
    "HttpTransportProtocol",
    "SmsDispatcherProtocol",
    "SmsMessageRequest",
    "SmsRequestValidatorProtocol",
    "SmsSendResult",
    "SmsSenderProtocol",
    "ValidationError",
]
